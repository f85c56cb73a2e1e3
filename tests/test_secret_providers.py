import boto3
import pytest
from botocore.stub import Stubber

from cars_api.exceptions import SecretUnavailable
from cars_api.repositories import AwsSecretsManagerProvider, EnvSecretProvider


@pytest.fixture()
def secretsmanager():
    client = boto3.client(
        "secretsmanager",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def test_aws_provider_returns_secret_string(secretsmanager):
    client, stubber = secretsmanager
    stubber.add_response(
        "get_secret_value",
        {"Name": "Final-Secret-Key", "SecretString": "abc123"},
        {"SecretId": "Final-Secret-Key"},
    )

    assert AwsSecretsManagerProvider(client).get("Final-Secret-Key") == "abc123"


def test_aws_provider_fetches_every_time(secretsmanager):
    client, stubber = secretsmanager
    for value in ("first", "second"):
        stubber.add_response(
            "get_secret_value",
            {"Name": "Final-Secret-Key", "SecretString": value},
            {"SecretId": "Final-Secret-Key"},
        )
    provider = AwsSecretsManagerProvider(client)

    assert provider.get("Final-Secret-Key") == "first"
    assert provider.get("Final-Secret-Key") == "second"


def test_aws_provider_missing_secret(secretsmanager):
    client, stubber = secretsmanager
    stubber.add_client_error(
        "get_secret_value",
        service_error_code="ResourceNotFoundException",
        http_status_code=400,
    )

    with pytest.raises(SecretUnavailable) as excinfo:
        AwsSecretsManagerProvider(client).get("SqlConnectionString")

    assert excinfo.value.name == "SqlConnectionString"
    assert excinfo.value.reason == "ResourceNotFoundException"


def test_aws_provider_binary_secret_is_unavailable(secretsmanager):
    client, stubber = secretsmanager
    stubber.add_response(
        "get_secret_value",
        {"Name": "Final-Secret-Key", "SecretBinary": b"\x00\x01"},
        {"SecretId": "Final-Secret-Key"},
    )

    with pytest.raises(SecretUnavailable):
        AwsSecretsManagerProvider(client).get("Final-Secret-Key")


def test_env_provider_verbatim_and_normalized_names():
    provider = EnvSecretProvider(
        {"Final-Secret-Key": "verbatim", "SQLCONNECTIONSTRING": "sqlite:///cars.db"}
    )
    assert provider.get("Final-Secret-Key") == "verbatim"
    assert provider.get("SqlConnectionString") == "sqlite:///cars.db"


def test_env_provider_normalizes_dashes():
    assert EnvSecretProvider({"FINAL_SECRET_KEY": "k"}).get("Final-Secret-Key") == "k"


def test_env_provider_missing():
    with pytest.raises(SecretUnavailable):
        EnvSecretProvider({}).get("Final-Secret-Key")
