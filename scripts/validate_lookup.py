"""Live validation script - run real lookups against api.github.com."""

import asyncio
import json
from datetime import datetime

from devfinder import DevFinder, WidgetConfig
from devfinder.core.exporter import state_to_dict

# Test accounts, the last one should not exist
HANDLES = [
    "octocat",
    "torvalds",
    "gvanrossum",
    "this-user-should-not-exist-0000",
]


async def validate_handle(finder: DevFinder, handle: str) -> dict:
    """Look up a single handle and summarize the outcome."""
    print(f"\n{'='*60}")
    print(f"Looking up {handle}...")
    print(f"{'='*60}")

    start = datetime.now()
    state = await finder.lookup(handle)
    duration = (datetime.now() - start).total_seconds()

    payload = state_to_dict(state)
    if state.error:
        print(f"❌ {state.error} ({duration:.2f}s)")
    else:
        view = payload["view"]
        print(f"✅ {view['name']} {view['handle']} ({duration:.2f}s)")
        print(f"   {view['joined']}")
        print(f"   Repos: {view['repos']}  Followers: {view['followers']}  Following: {view['following']}")
        for key in ("location", "blog", "twitter", "company"):
            entry = view[key]
            marker = " " if entry["available"] else "·"
            print(f"   {marker} {entry['label']}: {entry['text']}")

    return {"handle": handle, "status": payload["status"], "error": payload["error"]}


async def main() -> None:
    summary = []
    async with DevFinder(WidgetConfig()) as finder:
        for handle in HANDLES:
            summary.append(await validate_handle(finder, handle))

    print(f"\n{'='*60}")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
