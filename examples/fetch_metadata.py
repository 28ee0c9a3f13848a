"""
Example: Fetch citation metadata for a few GitHub projects.

Usage:
    python examples/fetch_metadata.py
"""

import asyncio

from citation_harvester import SourceFetcher


URLS = [
    "github.com/octocat/Hello-World",
    "github.com/pallets/click",
]


async def main():
    fetcher = SourceFetcher()
    results = await asyncio.gather(*(fetcher.fetch(url) for url in URLS))

    for url, result in zip(URLS, results):
        if not result.ok:
            print(f"{url}: {result.errors[0]}")
            continue
        data = result.data
        authors = ", ".join(a.last_name or a.first_name or "?" for a in data.authors)
        print(f"{data.name} {data.version or ''} ({data.url}) by {authors}")


if __name__ == "__main__":
    asyncio.run(main())
