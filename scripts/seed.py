"""Seed a running Articles API with generated articles over HTTP."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta

import httpx

BASE_URL = "http://localhost:8888"

TAGS = ["python", "fastapi", "pydantic", "asyncio", "docker", "kubernetes",
        "react", "typescript", "aws", "devops", "testing", "performance",
        "security", "microservices", "graphql", "rest-api"]


def make_article(i: int) -> dict:
    publish_at = datetime.now(timezone.utc) + timedelta(days=random.randint(-365, 30))
    return {
        "id": f"article-{i:05d}",
        "title": f"Article {i}: How to optimize {random.choice(TAGS)} applications",
        "tags": random.sample(TAGS, k=random.randint(0, 4)),
        "content": f"This is the full content of article {i}. " * 20,
        "publishAt": publish_at.isoformat(),
    }


async def seed(base_url: str, count: int, show: bool = False) -> None:
    print(f"Seeding {count} articles into {base_url}")
    start = time.perf_counter()
    created = skipped = 0

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        for i in range(count):
            resp = await client.put("/articles", json=make_article(i))
            if resp.status_code == 200:
                created += 1
            elif resp.status_code == 409:
                skipped += 1
            else:
                resp.raise_for_status()

        if show:
            resp = await client.get("/articles")
            resp.raise_for_status()
            for article in sorted(resp.json(), key=lambda a: a["id"]):
                print(f"  {article['id']}  {article['publishAt']}  {article['title']}")

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Created: {created}")
    print(f"  Already present: {skipped}")


def main():
    parser = argparse.ArgumentParser(description="Seed the Articles API")
    parser.add_argument("--base-url", default=BASE_URL)
    parser.add_argument("--count", type=int, default=100, help="Number of articles to create")
    parser.add_argument("--show", action="store_true", help="Print the stored articles afterwards")
    args = parser.parse_args()
    asyncio.run(seed(args.base_url, args.count, show=args.show))


if __name__ == "__main__":
    main()
