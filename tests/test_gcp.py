from cloudless.cluster.gcp import match_labels, match_tags


def test_match_tags_any():
    assert match_tags(["aerospike"], ["web", "aerospike"]) is True


def test_match_tags_none():
    assert match_tags(["aerospike"], ["web"]) is False


def test_match_tags_empty_wanted():
    assert match_tags([], ["web"]) is False


def test_match_labels_all():
    actual = {"service": "sss", "environment": "eee", "extra": "x"}
    assert match_labels({"service": "sss", "environment": "eee"}, actual) is True


def test_match_labels_mismatch():
    assert match_labels({"service": "sss", "environment": "eee"}, {"service": "sss"}) is False


def test_match_labels_empty_wanted():
    assert match_labels({}, {"a": "b"}) is True


def test_match_labels_missing_reads_as_empty():
    assert match_labels({"a": ""}, {}) is True