#!/usr/bin/env python3
"""
Rollout demo: send a fraction of calls to an experimental service.
"""

import argparse
from collections import Counter
from typing import Optional

from balancer_core import BalancerConfig, ForwardingProxy, RolloutSelection, configure_logging


class ProdService:
    def do_work(self, payload):
        return f"prod svc handled: {payload}"


class ExpService:
    def do_work(self, payload):
        return f"exp svc handled: {payload}"


def build_proxy(percentage: int, config_path: Optional[str] = None) -> ForwardingProxy:
    services = [ProdService(), ExpService()]
    if config_path:
        return BalancerConfig.from_file(config_path).build_proxy(services)
    return ForwardingProxy(services, RolloutSelection(percentage=percentage))


def main():
    parser = argparse.ArgumentParser(description="Forward calls to a production or experimental service.")
    parser.add_argument(
        "--percentage",
        type=int,
        default=10,
        help="Share of calls (0-100) routed to the experimental service.",
    )
    parser.add_argument(
        "--config",
        help="JSON config file describing the strategy (overrides --percentage).",
    )
    parser.add_argument(
        "--calls",
        type=int,
        default=10,
        help="Number of calls to forward.",
    )
    parser.add_argument(
        "--payload",
        default="my task",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="DEBUG shows each forwarding decision.",
    )
    args = parser.parse_args()

    configure_logging(log_level=args.log_level)
    lb = build_proxy(args.percentage, args.config)

    tally = Counter()
    for _ in range(args.calls):
        result = lb.do_work(args.payload)
        tally[result.split(" ", 1)[0]] += 1
        print(result)

    print(f"\n{lb!r}")
    print(", ".join(f"{name}={count}" for name, count in sorted(tally.items())))


if __name__ == "__main__":
    main()
