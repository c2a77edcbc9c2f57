"""HTTP latency benchmark for the Articles API endpoints."""
import asyncio
import argparse
import statistics
import time

import httpx

BASE_URL = "http://localhost:8888"

# Benchmarked article; created once before timing starts.
PROBE_ARTICLE = {
    "id": "benchmark-probe",
    "title": "Benchmark probe",
    "tags": ["benchmark"],
    "content": "Probe content. " * 50,
    "publishAt": "2024-01-01T00:00:00Z",
}

ENDPOINTS = [
    ("GET /articles", "GET", "/articles", None),
    ("GET /articles/{id}", "GET", f"/articles/{PROBE_ARTICLE['id']}", None),
    ("PUT /articles/{id}", "PUT", f"/articles/{PROBE_ARTICLE['id']}", PROBE_ARTICLE),
    ("GET /health", "GET", "/health", None),
]


async def benchmark_endpoint(
    client: httpx.AsyncClient, name: str, method: str, path: str, body: dict | None, iterations: int = 50
) -> dict:
    times = []
    errors = 0

    # Warmup
    for _ in range(3):
        try:
            await client.request(method, path, json=body)
        except httpx.HTTPError:
            pass

    for _ in range(iterations):
        try:
            start = time.perf_counter()
            resp = await client.request(method, path, json=body)
            elapsed = (time.perf_counter() - start) * 1000

            if resp.status_code == 200:
                times.append(elapsed)
            else:
                errors += 1
        except httpx.HTTPError:
            errors += 1

    if not times:
        return {"name": name, "error": f"All {iterations} requests failed"}

    ordered = sorted(times)
    return {
        "name": name,
        "avg_ms": round(statistics.mean(times), 2),
        "p50_ms": round(ordered[len(ordered) // 2], 2),
        "p95_ms": round(ordered[int(len(ordered) * 0.95)], 2),
        "p99_ms": round(ordered[int(len(ordered) * 0.99)], 2),
        "errors": errors,
    }


async def run_benchmark(base_url: str, iterations: int = 50) -> None:
    print("=" * 72)
    print(f"Articles API Benchmark — {iterations} iterations per endpoint")
    print(f"Target: {base_url}")
    print("=" * 72)

    async with httpx.AsyncClient(base_url=base_url) as client:
        try:
            resp = await client.get("/health")
            if resp.status_code != 200:
                print(f"ERROR: Health check failed ({resp.status_code})")
                return
            print(f"Health: {resp.json()}")
        except httpx.HTTPError as e:
            print(f"ERROR: Cannot connect to {base_url} — {e}")
            return

        # 200 on first run, 409 when the probe survived a previous run.
        await client.put("/articles", json=PROBE_ARTICLE)

        print()
        print(f"{'Endpoint':<30} {'Avg':>9} {'P50':>9} {'P95':>9} {'P99':>9} {'Err':>4}")
        print("-" * 72)

        for name, method, path, body in ENDPOINTS:
            result = await benchmark_endpoint(client, name, method, path, body, iterations)
            if "error" in result:
                print(f"{result['name']:<30} {'ERROR':>9}")
            else:
                print(
                    f"{result['name']:<30} "
                    f"{result['avg_ms']:>7.1f}ms "
                    f"{result['p50_ms']:>7.1f}ms "
                    f"{result['p95_ms']:>7.1f}ms "
                    f"{result['p99_ms']:>7.1f}ms "
                    f"{result['errors']:>4}"
                )

        print("-" * 72)
        await client.delete(f"/articles/{PROBE_ARTICLE['id']}")
        print("\nBenchmark complete.")


def main():
    parser = argparse.ArgumentParser(description="Benchmark the Articles API")
    parser.add_argument("-n", "--iterations", type=int, default=50, help="Iterations per endpoint")
    parser.add_argument("--base-url", default=BASE_URL, help="API base URL")
    args = parser.parse_args()
    asyncio.run(run_benchmark(args.base_url, args.iterations))


if __name__ == "__main__":
    main()
