import argparse
import sys

from azure_auth import authenticate, load_credentials
from report import DEFAULT_MAX_RECORDS, enumerate_metric_definitions

CPU_PERCENTAGE_FILTER = "name.value eq 'CpuPercentage'"


def list_metric_definitions(client, resource_uri, filter_str=None):
    # $filter is a disjunction: name.value eq '<name>' or name.value eq '<name>' ...
    if filter_str is None:
        return client.metric_definitions.list(resource_uri)
    return client.metric_definitions.list(resource_uri, filter=filter_str)


def run_metric_definitions_sample(client, resource_uri, max_records=DEFAULT_MAX_RECORDS):
    definitions = list_metric_definitions(client, resource_uri)
    enumerate_metric_definitions(definitions, max_records)

    definitions = list_metric_definitions(client, resource_uri, CPU_PERCENTAGE_FILTER)
    enumerate_metric_definitions(definitions, max_records)


def main(argv=None):
    parser = argparse.ArgumentParser(description="List metric definitions for an Azure resource")
    parser.add_argument("--resource_id", required=True)
    parser.add_argument("--filter", help="e.g. \"name.value eq 'CpuPercentage'\"")
    parser.add_argument("--max_records", type=int, default=DEFAULT_MAX_RECORDS)
    args = parser.parse_args(argv)

    credentials = load_credentials()
    if credentials is None:
        return

    client = authenticate(credentials)
    print(f"🔍 Metric definitions for {args.resource_id}:", file=sys.stderr)
    definitions = list_metric_definitions(client, args.resource_id, args.filter)
    enumerate_metric_definitions(definitions, args.max_records)


if __name__ == "__main__":
    main()
