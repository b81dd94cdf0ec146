"""端口扫描使用示例。"""
import asyncio
from portprobe import ScanConfig, ScanEngine, parse_ports


async def demo_local_scan():
    """演示本机扫描。"""
    print("=== 本机端口扫描演示 ===")

    config = ScanConfig.from_millis(
        host="127.0.0.1",
        ports=parse_ports("20-25,80,443,3306,5432,6379,8000-8100"),
        timeout_ms=300,
        concurrency_limit=50,
        collect_banner=True
    )

    print(f"扫描目标: {config.host} ({len(config.ports)} 个端口)")
    results = await ScanEngine().scan(config)

    if not results:
        print("未发现开放端口")
        return

    print(f"\n开放端口 ({len(results)}):")
    for outcome in sorted(results, key=lambda o: o.port):
        print(f"  - {outcome.port}/tcp: {outcome.service} {outcome.banner[:60]}")


async def demo_callback():
    """演示结果回调。"""
    print("\n=== 结果回调演示 ===")

    found = []
    engine = ScanEngine(on_outcome=found.append)
    config = ScanConfig.from_millis("127.0.0.1", parse_ports("1-1024"), timeout_ms=200)
    await engine.scan(config)

    print(f"回调收到 {len(found)} 个开放端口")


async def main():
    """运行所有演示。"""
    await demo_local_scan()
    await demo_callback()


if __name__ == "__main__":
    asyncio.run(main())
