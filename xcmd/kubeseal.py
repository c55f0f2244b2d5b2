"""Sealing Kubernetes secrets with a cached certificate path."""

from __future__ import annotations

import subprocess

from .props import PropStore

CERT_KEY = "kubeseal-cert"
MISSING_CERT = (
    "No cert path provided. Please provide the path to the kubeseal certificate."
)


class MissingCertError(Exception):
    """No certificate path was given and none is cached."""


def seal(props: PropStore, cert: str | None = None, stdin: bytes | None = None) -> str:
    """Run ``kubeseal`` on the secret and return its YAML; ``cert`` is cached."""
    if cert is not None:
        props.set(CERT_KEY, cert)
    cert_path = props.get(CERT_KEY)
    if not cert_path:
        raise MissingCertError(MISSING_CERT)
    result = subprocess.run(
        ["kubeseal", "--format=yaml", f"--cert={cert_path}"],
        input=stdin,
        stdout=subprocess.PIPE,
        check=True,
    )
    return result.stdout.decode("utf-8", errors="replace")