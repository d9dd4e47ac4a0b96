#!/usr/bin/env python3
"""
Quick Start Guide for quectodom.

This example walks through building a small page fragment with wrappers,
rendering readings as a table, and caching a JSON fetch.
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quectodom import (
    CachedFile,
    ElementWrapper,
    Heading,
    TableMaker,
    TextWrapper,
    format_time,
    format_unit,
)


def wrapper_example():
    """Build a fragment with the fluent wrapper interface."""

    print("🚀 QUICK START - quectodom")
    print("=" * 45)

    print("\n📄 Step 1: Building a fragment")
    print("-" * 30)

    status = TextWrapper("loading")
    panel = (
        ElementWrapper("div")
        .set_id("status")
        .add_classes("panel", "", None, "active")
        .attribute("data-source", "meter")
        .append(ElementWrapper("h2").append("Status"), status)
    )
    status.text = "online"

    print(panel.to_markup())


def table_example():
    """Render sparse readings as a dense table."""

    print("\n📊 Step 2: Rendering a table")
    print("-" * 30)

    readings = [
        {"time": "2023-06-01T09:00:00", "power": 1.25},
        {"time": "2023-06-01T10:00:00"},
        {"time": "2023-06-01T11:00:00", "power": 3.5, "note": "peak"},
    ]

    table = TableMaker(
        Heading("time", "Time"),
        Heading("power", "Power"),
        Heading("note", "Note"),
    ).set_id("readings")

    for reading in readings:
        row = {"time": format_time(reading["time"])}
        if "power" in reading:
            row["power"] = {
                "classes": ["hot"] if reading["power"] > 3 else [],
                "content": format_unit(reading["power"], "kW", places=2),
            }
        if "note" in reading:
            row["note"] = reading["note"]
        table.append_rows(row)

    print(f"✅ {table.row_count} rows x {len(table.headings)} columns")
    print(table.to_markup())


async def cache_example():
    """Serve repeated reads from a time-expiring cache."""

    print("\n🗄️  Step 3: Caching a fetch")
    print("-" * 30)

    calls = []

    async def fake_fetch(method, uri):
        calls.append((method, uri))
        return {"fetched": len(calls)}

    cache = CachedFile("GET", "http://example.invalid/data.json", ttl_ms=60_000,
                       fetcher=fake_fetch)
    await cache.get()
    await cache.get()
    await cache.get(force=True)
    print(f"✅ 3 reads, {len(calls)} fetches")


def main():
    """Main function."""
    try:
        wrapper_example()
        table_example()
        asyncio.run(cache_example())

        print("\n✅ All examples completed successfully!")
        return 0

    except Exception as e:
        print(f"\n❌ Example failed: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
