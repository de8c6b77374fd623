from promdedup.metrics.keys import FamilyKey, InstanceKey, family_key, instance_key


def test_instance_key_ignores_pair_order():
    a = instance_key("jobs_total", (("queue", "default"), ("1", "GET")))
    b = instance_key("jobs_total", (("1", "GET"), ("queue", "default")))
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1


def test_keys_compare_full_key_not_digest():
    # Plain concatenation would make these identical ("nameabc")
    a = InstanceKey("name", (("ab", "c"),))
    b = InstanceKey("name", (("a", "bc"),))
    assert a != b
    assert a.digest() != b.digest()


def test_digest_is_stable_and_short():
    k = instance_key("jobs_total", (("queue", "default"),))
    assert k.digest() == instance_key("jobs_total", (("queue", "default"),)).digest()
    assert len(k.digest()) == 16
    assert family_key("jobs_total").digest() != family_key("jobs").digest()


def test_instance_key_family_and_labels():
    k = instance_key("jobs_total", (("queue", "default"),))
    assert k.family == FamilyKey("jobs_total")
    assert k.label_dict() == {"queue": "default"}
