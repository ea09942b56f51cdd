#!/usr/bin/env python3
"""Console formatting for metric definitions and metric values."""

from itertools import islice

DEFAULT_MAX_RECORDS = 5

METRIC_DEFINITION_TEMPLATE = (
    "Id: {0}\n Name: {1}, {2}\nResourceId: {3}\nUnit: {4}\n"
    "Primary aggregation type: {5}\nList of metric availabilities: {6}"
)
METRICS_HEADER = "Id\tName.Value\tName.Localized\tType\tUnit\tData"
METRIC_ROW_TEMPLATE = "{0}\t{1}\t{2}\t{3}\t{4}\t{5}"


def write(template, *items):
    """Fill positional {0}-style placeholders and print one line."""
    print(template.format(*items))


def first(records, max_records):
    """Yield at most max_records entries without draining the rest."""
    return islice(records, max(max_records, 0))


def name_parts(record):
    name = getattr(record, "name", None)
    if name is None:
        return None, None
    return getattr(name, "value", None), getattr(name, "localized_value", None)


def enumerate_metric_definitions(metric_definitions, max_records=DEFAULT_MAX_RECORDS):
    for definition in first(metric_definitions, max_records):
        value, localized = name_parts(definition)
        write(
            METRIC_DEFINITION_TEMPLATE,
            getattr(definition, "id", None),
            value,
            localized,
            getattr(definition, "resource_id", None),
            getattr(definition, "unit", None),
            getattr(definition, "primary_aggregation_type", None),
            getattr(definition, "metric_availabilities", None),
        )


def enumerate_metrics(metrics, max_records=DEFAULT_MAX_RECORDS):
    write(METRICS_HEADER)
    for metric in first(metrics, max_records):
        value, localized = name_parts(metric)
        write(
            METRIC_ROW_TEMPLATE,
            getattr(metric, "id", None),
            value,
            localized,
            getattr(metric, "type", None),
            getattr(metric, "unit", None),
            getattr(metric, "data", None),
        )
