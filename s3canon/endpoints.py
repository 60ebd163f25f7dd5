"""Endpoint value type and classification of well-known storage endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

from s3canon.host_validation import is_valid_host

SECURE_SCHEME = "https"
SUPPORTED_SCHEMES = frozenset({"http", SECURE_SCHEME})
BUCKET_LOOKUP_MODES = frozenset({"auto", "dns", "path"})


class EndpointURLError(ValueError):
    """Raised when an endpoint URL cannot be parsed."""


class EndpointKind(str, Enum):
    """Closed table of service hosts known to this client."""

    AMAZON = "s3.amazonaws.com"
    AMAZON_CHINA = "s3.cn-north-1.amazonaws.com.cn"
    AMAZON_GOVCLOUD = "s3-us-gov-west-1.amazonaws.com"
    AMAZON_FIPS_GOVCLOUD = "s3-fips-us-gov-west-1.amazonaws.com"
    GOOGLE = "storage.googleapis.com"


_KINDS_BY_HOST = {kind.value: kind for kind in EndpointKind}


@dataclass(frozen=True, slots=True)
class EndpointURL:
    """Already-split endpoint URL. `host` keeps an explicit port if present."""

    scheme: str
    host: str
    path: str = ""

    @property
    def is_secure(self) -> bool:
        return self.scheme == SECURE_SCHEME

    @classmethod
    def parse(cls, url: str) -> EndpointURL:
        """
        Split an endpoint string such as ``https://s3.amazonaws.com``.

        Raises:
            EndpointURLError: when the scheme, host or port is unusable.
        """

        try:
            parts = urlsplit(url.strip())
        except ValueError as exc:
            raise EndpointURLError("Endpoint URL is invalid") from exc

        scheme = parts.scheme.lower()
        if scheme not in SUPPORTED_SCHEMES:
            raise EndpointURLError("Endpoint scheme must be http or https")
        if "@" in parts.netloc:
            raise EndpointURLError("Endpoint userinfo is not allowed")

        hostname = parts.hostname
        if not hostname or not is_valid_host(hostname):
            raise EndpointURLError("Endpoint must include a valid host")

        try:
            parts.port
        except ValueError as exc:
            raise EndpointURLError("Endpoint has an invalid port") from exc

        return cls(scheme=scheme, host=parts.netloc, path=parts.path)


def classify_endpoint(endpoint_url: EndpointURL | None) -> EndpointKind | None:
    """Return the known endpoint kind for an exact host match, else None."""

    if endpoint_url is None:
        return None
    return _KINDS_BY_HOST.get(endpoint_url.host)


def is_amazon_china_endpoint(endpoint_url: EndpointURL | None) -> bool:
    # China region needs separate AWS credentials from the global partition.
    return classify_endpoint(endpoint_url) is EndpointKind.AMAZON_CHINA


def is_amazon_fips_govcloud_endpoint(endpoint_url: EndpointURL | None) -> bool:
    return classify_endpoint(endpoint_url) is EndpointKind.AMAZON_FIPS_GOVCLOUD


def is_amazon_govcloud_endpoint(endpoint_url: EndpointURL | None) -> bool:
    return (
        classify_endpoint(endpoint_url) is EndpointKind.AMAZON_GOVCLOUD
        or is_amazon_fips_govcloud_endpoint(endpoint_url)
    )


def is_amazon_endpoint(endpoint_url: EndpointURL | None) -> bool:
    """Match the global S3 endpoint or the China endpoint, GovCloud excluded."""

    if is_amazon_china_endpoint(endpoint_url):
        return True
    return classify_endpoint(endpoint_url) is EndpointKind.AMAZON


def is_google_endpoint(endpoint_url: EndpointURL | None) -> bool:
    return classify_endpoint(endpoint_url) is EndpointKind.GOOGLE


def is_virtual_host_supported(endpoint_url: EndpointURL | None, bucket_name: str) -> bool:
    """
    Return True when bucket_name can be addressed as a subdomain of the endpoint.

    Dotted bucket names are refused over TLS: ``my.bucket.s3.amazonaws.com``
    does not match the service's ``*.s3.amazonaws.com`` certificate.
    """

    if endpoint_url is None:
        return False
    if endpoint_url.is_secure and "." in bucket_name:
        return False
    return is_amazon_endpoint(endpoint_url) or is_google_endpoint(endpoint_url)


def use_virtual_host_style(
    endpoint_url: EndpointURL | None,
    bucket_name: str,
    bucket_lookup: str = "auto",
) -> bool:
    """Pick the addressing style for a request given a configured lookup mode."""

    if bucket_lookup not in BUCKET_LOOKUP_MODES:
        raise ValueError(f"bucket_lookup must be one of {sorted(BUCKET_LOOKUP_MODES)}")
    if endpoint_url is None:
        return False
    if bucket_lookup == "dns":
        return True
    if bucket_lookup == "path":
        return False
    return is_virtual_host_supported(endpoint_url, bucket_name)
