import prometheus_client
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, generate_latest

# Guard against duplicated metric registration when the module is imported
# multiple times (for example, when running uvicorn with the reloader).
AUTH_ATTEMPTS = getattr(prometheus_client, "infonest_AUTH_ATTEMPTS", None)
ACTIVE_SESSIONS = getattr(prometheus_client, "infonest_ACTIVE_SESSIONS", None)
TOKEN_OPERATIONS = getattr(prometheus_client, "infonest_TOKEN_OPERATIONS", None)
PERMISSION_CHECKS = getattr(prometheus_client, "infonest_PERMISSION_CHECKS", None)

if AUTH_ATTEMPTS is None:
    # Authentication Metrics
    AUTH_ATTEMPTS = Counter(
        "infonest_auth_attempts_total",
        "Total authentication attempts",
        ["result", "method"],  # result: success/failure, method: login/signup/restore
    )
    ACTIVE_SESSIONS = Gauge("infonest_active_sessions", "Number of active client sessions")
    TOKEN_OPERATIONS = Counter(
        "infonest_token_operations_total",
        "Total token operations",
        ["operation"],  # operation: generate/verify/revoke
    )

    # Authorization Metrics
    PERMISSION_CHECKS = Counter(
        "infonest_permission_checks_total",
        "Total permission checks",
        ["result", "permission"],  # result: granted/denied
    )

    prometheus_client.infonest_AUTH_ATTEMPTS = AUTH_ATTEMPTS  # type: ignore[attr-defined]
    prometheus_client.infonest_ACTIVE_SESSIONS = ACTIVE_SESSIONS  # type: ignore[attr-defined]
    prometheus_client.infonest_TOKEN_OPERATIONS = TOKEN_OPERATIONS  # type: ignore[attr-defined]
    prometheus_client.infonest_PERMISSION_CHECKS = PERMISSION_CHECKS  # type: ignore[attr-defined]


def record_permission_check(permission: str, granted: bool) -> None:
    if PERMISSION_CHECKS is not None:
        result = "granted" if granted else "denied"
        PERMISSION_CHECKS.labels(result=result, permission=permission).inc()


def metrics_response():
    data = generate_latest()
    return data, CONTENT_TYPE_LATEST
