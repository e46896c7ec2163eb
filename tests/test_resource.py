import pytest

from cloudless.mbus.resource import (
    RESOURCE_TYPE_QUEUE,
    RESOURCE_TYPE_TOPIC,
    Credentials,
    Resource,
    decode_resource,
)


def test_decode_valid_resource():
    actual = decode_resource(
        "q1|s3_queue|aws|queue|s3_queue|us-west-1|~/.secret/aws-e2e.json"
    )
    expected = Resource(
        id="q1",
        name="s3_queue",
        vendor="aws",
        type=RESOURCE_TYPE_QUEUE,
        region="us-west-1",
        url="s3_queue",
        credentials=Credentials(url="~/.secret/aws-e2e.json"),
    )
    assert actual == expected


def test_decode_without_id_field_rejects_type():
    with pytest.raises(ValueError, match="invalid resource: type: s3_queue"):
        decode_resource("s3_queue|aws|queue|s3_queue|us-west-1|~/.secret/aws-e2e.json")


def test_decode_with_semicolons_and_secret_key():
    actual = decode_resource("t1;events;aws;topic;events;us-east-1;mem://secret;blowfish")
    assert actual.type == RESOURCE_TYPE_TOPIC
    assert actual.credentials == Credentials(url="mem://secret", key="blowfish")
    assert actual.region == "us-east-1"


def test_decode_minimal_has_no_region_or_credentials():
    actual = decode_resource("a|b|mem|subscription|u")
    assert actual.region == ""
    assert actual.credentials is None
    assert actual.url == "u"


def test_decode_too_few_parts():
    with pytest.raises(ValueError, match="invalid format"):
        decode_resource("a|b|c|queue")


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://sqs.example.com/123/my-queue", "my-queue"),
        ("arn:aws:sns:us-west-2:000:my-topic", "my-topic"),
        ("plainname", "plainname"),
    ],
)
def test_init_derives_name(url, expected):
    resource = Resource(url=url)
    resource.init()
    assert resource.name == expected


def test_init_keeps_existing_name():
    resource = Resource(url="https://host.example.com/x", name="given")
    resource.init()
    assert resource.name == "given"