"""SecretProvider implementations.

Both classes satisfy the SecretProvider protocol through structural
typing. Neither caches: each ``get`` goes back to the store.
"""

import os
import re
from collections.abc import Mapping

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cars_api.config import get_settings
from cars_api.exceptions import SecretUnavailable

_ENV_NAME_RE = re.compile(r"[^A-Za-z0-9]+")


class AwsSecretsManagerProvider:
    """Secret provider backed by AWS Secrets Manager.

    Wraps one boto3 client for the process lifetime; the client is created
    by ``create`` (or passed in by tests) and reused for every fetch.
    """

    def __init__(self, client) -> None:
        """Initialize the provider.

        Args:
            client: A boto3 ``secretsmanager`` client.
        """
        self._client = client

    @classmethod
    def create(cls, region_name: str | None = None) -> "AwsSecretsManagerProvider":
        """Factory method creating the boto3 client for the configured region.

        Args:
            region_name: AWS region. If None, uses settings.
        """
        client = boto3.client("secretsmanager", region_name=region_name or get_settings().aws_region)
        return cls(client)

    def get(self, name: str) -> str:
        try:
            response = self._client.get_secret_value(SecretId=name)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            raise SecretUnavailable(name, code) from e
        except BotoCoreError as e:
            raise SecretUnavailable(name, type(e).__name__) from e

        value = response.get("SecretString")
        if value is None:
            raise SecretUnavailable(name, "secret has no string value")
        return value


class EnvSecretProvider:
    """Secret provider reading the process environment (local development).

    The name is tried verbatim first, then as an environment-style name:
    ``Final-Secret-Key`` -> ``FINAL_SECRET_KEY``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    @staticmethod
    def env_name(name: str) -> str:
        return _ENV_NAME_RE.sub("_", name).strip("_").upper()

    def get(self, name: str) -> str:
        for key in (name, self.env_name(name)):
            value = self._environ.get(key)
            if value is not None:
                return value
        raise SecretUnavailable(name, "not set in environment")
