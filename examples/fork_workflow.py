#!/usr/bin/env python3
"""
hubfork - fork workflow example

Runs the fork workflow in dry-run mode against the checkout in the current
directory and prints the git commands it would run.

Run with: python examples/fork_workflow.py [ORGANIZATION]
"""

import logging
import sys

from hubfork import (
    CommandRunner,
    ForkRequest,
    ForkWorkflow,
    HostConfig,
    HubForkError,
    LocalRepository,
    configure_logging,
)


def main() -> int:
    configure_logging(level=logging.INFO, http_level=logging.DEBUG)

    organization = sys.argv[1] if len(sys.argv) > 1 else None
    config = HostConfig.from_env()

    try:
        repo = LocalRepository(".", known_hosts=config.known_hosts())
        workflow = ForkWorkflow(repo, config)
        result = workflow.run(ForkRequest(organization=organization, noop=True))
    except HubForkError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(f"source: {result.source}")
    print(f"fork:   {result.fork} (created: {result.created})")
    print("commands:")
    CommandRunner(noop=True, echo=lambda line: print(f"  {line}")).run(result.plan)
    return 0


if __name__ == "__main__":
    sys.exit(main())
