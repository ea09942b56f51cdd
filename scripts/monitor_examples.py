#!/usr/bin/env python3
"""Print Azure Monitor metric definitions and metric values for one resource.

Usage:
    monitor_examples.py <resourceId> [--max_records N] [--verbose]

Credentials are read from AZURE_TENANT_ID, AZURE_CLIENT_ID,
AZURE_CLIENT_SECRET and AZURE_SUBSCRIPTION_ID. Each list endpoint is called
once without a filter and once with a $filter expression.
"""

import argparse
import sys

import azure_auth
from discover_metrics import run_metric_definitions_sample
from metrics import run_metrics_sample
from report import DEFAULT_MAX_RECORDS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="azure-monitor-examples",
        description="List metric definitions and metrics for an Azure resource",
    )
    parser.add_argument("resource_id", help="Full Azure resource id")
    parser.add_argument("--max_records", type=int, default=DEFAULT_MAX_RECORDS,
                        help="Records shown per call")
    parser.add_argument("--verbose", action="store_true", help="Progress on stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    credentials = azure_auth.load_credentials()
    if credentials is None:
        return

    if args.verbose:
        print(f"🔍 Authenticating client {credentials.client_id} in tenant {credentials.tenant_id}...",
              file=sys.stderr)
    client = azure_auth.authenticate(credentials)

    if args.verbose:
        print(f"🔍 Listing metric definitions for {args.resource_id}...", file=sys.stderr)
    run_metric_definitions_sample(client, args.resource_id, args.max_records)

    if args.verbose:
        print(f"🔍 Listing metrics for {args.resource_id}...", file=sys.stderr)
    run_metrics_sample(client, args.resource_id, max_records=args.max_records)


if __name__ == "__main__":
    main()
