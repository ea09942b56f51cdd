"""Service principal credentials and the read-only Azure Monitor client."""

import os
import sys
from typing import NamedTuple

from azure.identity import ClientSecretCredential
from azure.mgmt.monitor import MonitorManagementClient
from azure.profiles import ProfileDefinition

REQUIRED_VARIABLES = (
    "AZURE_TENANT_ID",
    "AZURE_CLIENT_ID",
    "AZURE_CLIENT_SECRET",
    "AZURE_SUBSCRIPTION_ID",
)

MANAGEMENT_SCOPE = "https://management.azure.com/.default"

MISSING_CREDENTIALS_MESSAGE = (
    "Please provide environment variables for AZURE_TENANT_ID, AZURE_CLIENT_ID, "
    "AZURE_CLIENT_SECRET and AZURE_SUBSCRIPTION_ID."
)

# Single-dimensional metrics API: the versions whose list calls take $filter
SINGLE_DIMENSION_PROFILE = ProfileDefinition(
    {
        "azure.mgmt.monitor.MonitorManagementClient": {
            "metric_definitions": "2016-03-01",
            "metrics": "2016-09-01",
        }
    },
    "azure-monitor-examples-single-dimension",
)


class Credentials(NamedTuple):
    tenant_id: str
    client_id: str
    secret: str
    subscription_id: str


def missing_variables(environ=None):
    """Return the required variable names that are unset or empty."""
    environ = os.environ if environ is None else environ
    return [name for name in REQUIRED_VARIABLES if not environ.get(name)]


def load_credentials(environ=None):
    """Read the service principal from the environment.

    Returns a Credentials tuple, or None after printing a warning when any of
    the four variables is missing. Nothing is built from partial values.
    """
    environ = os.environ if environ is None else environ
    missing = missing_variables(environ)
    if missing:
        print(MISSING_CREDENTIALS_MESSAGE)
        print(f"⚠️ Missing: {', '.join(missing)}", file=sys.stderr)
        return None

    return Credentials(*(environ[name] for name in REQUIRED_VARIABLES))


def authenticate(credentials):
    """Log in silently as the service principal and bind a client to the subscription."""
    token_credential = ClientSecretCredential(
        tenant_id=credentials.tenant_id,
        client_id=credentials.client_id,
        client_secret=credentials.secret,
    )
    # Fail here rather than on the first list call
    token_credential.get_token(MANAGEMENT_SCOPE)
    return MonitorManagementClient(
        token_credential,
        credentials.subscription_id,
        profile=SINGLE_DIMENSION_PROFILE,
    )
