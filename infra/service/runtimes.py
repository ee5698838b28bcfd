"""Runtime registry: identifier → Lambda runtime."""

from aws_cdk import aws_lambda as _lambda

_runtimes: dict[str, _lambda.Runtime] = {
    "provided.al2": _lambda.Runtime.PROVIDED_AL2,
    "provided.al2023": _lambda.Runtime.PROVIDED_AL2023,
}


def get_runtime(name: str) -> _lambda.Runtime:
    """Resolve a runtime identifier for custom-runtime artifacts."""
    try:
        return _runtimes[name]
    except KeyError:
        supported = ", ".join(supported_runtimes())
        raise ValueError(f"Unknown runtime: {name} (supported: {supported})") from None


def supported_runtimes() -> list[str]:
    return sorted(_runtimes)
