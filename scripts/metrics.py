import argparse
import sys
from datetime import datetime, timedelta

from azure_auth import authenticate, load_credentials
from report import DEFAULT_MAX_RECORDS, enumerate_metrics, write

DEFAULT_METRIC_NAME = "CpuPercentage"
DEFAULT_TIME_GRAIN = "PT5M"
DEFAULT_WINDOW_HOURS = 3


def round_trip(dt):
    """ISO-8601 with microseconds and UTC offset; naive datetimes are local time."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt.isoformat(timespec="microseconds")


def metric_names_filter(names):
    """Disjunction of name.value clauses, parenthesised when there is more than one."""
    if isinstance(names, str):
        names = [names]
    clauses = [f"name.value eq '{name}'" for name in names]
    if not clauses:
        raise ValueError("at least one metric name is required")
    if len(clauses) == 1:
        return clauses[0]
    return "(" + " or ".join(clauses) + ")"


def time_grain_clause(time_grain):
    return f" and timeGrain eq duration'{time_grain}'"


def start_time_clause(start):
    return f" and startTime eq {round_trip(start)}"


def end_time_clause(end):
    return f" and endTime eq {round_trip(end)}"


def build_metrics_filter(metric_names, time_grain, start, end):
    # Time grain and time range are each a conjunction with the names
    return (
        metric_names_filter(metric_names)
        + time_grain_clause(time_grain)
        + start_time_clause(start)
        + end_time_clause(end)
    )


def list_metrics(client, resource_uri, filter_str=None):
    if filter_str is None:
        return client.metrics.list(resource_uri)
    return client.metrics.list(resource_uri, filter=filter_str)


def run_metrics_sample(client, resource_uri, now=None, max_records=DEFAULT_MAX_RECORDS,
                       metric_names=(DEFAULT_METRIC_NAME,), time_grain=DEFAULT_TIME_GRAIN,
                       hours=DEFAULT_WINDOW_HOURS):
    write("Call without filter parameter (i.e. $filter = null)")
    metrics = list_metrics(client, resource_uri)
    enumerate_metrics(metrics, max_records)

    now = now or datetime.now()
    filter_str = build_metrics_filter(metric_names, time_grain, now - timedelta(hours=hours), now)

    write("Call with filter parameter (i.e. $filter = {0})", filter_str)
    metrics = list_metrics(client, resource_uri, filter_str)
    enumerate_metrics(metrics, max_records)
    return filter_str


def main(argv=None):
    parser = argparse.ArgumentParser(description="List metric values for an Azure resource")
    parser.add_argument("--resource_id", required=True)
    parser.add_argument("--metric", action="append", dest="metrics", help="Metric name (repeatable)")
    parser.add_argument("--time_grain", default=DEFAULT_TIME_GRAIN, help="ISO-8601 duration")
    parser.add_argument("--hours", type=float, default=DEFAULT_WINDOW_HOURS, help="Window ending now")
    parser.add_argument("--max_records", type=int, default=DEFAULT_MAX_RECORDS)
    args = parser.parse_args(argv)

    credentials = load_credentials()
    if credentials is None:
        return

    client = authenticate(credentials)
    print(f"🔍 Metrics for {args.resource_id}:", file=sys.stderr)
    run_metrics_sample(
        client,
        args.resource_id,
        max_records=args.max_records,
        metric_names=args.metrics or [DEFAULT_METRIC_NAME],
        time_grain=args.time_grain,
        hours=args.hours,
    )


if __name__ == "__main__":
    main()
