import pytest

from research_advisor.storage.history import HistoryStore, topic_key


@pytest.fixture
def store():
    return HistoryStore("sqlite:///:memory:", max_items=3)


def test_add_and_list_newest_first(store):
    store.add("Topic A", "### A", timestamp=1)
    store.add("Topic B", "### B", timestamp=2)

    items = store.list()
    assert [i.topic for i in items] == ["Topic B", "Topic A"]
    assert items[0].analysis == "### B"
    assert len(items[0].id) == 32

def test_same_topic_replaces_earlier_entry(store):
    first = store.add("Quantum Error Correction", "old", timestamp=1)
    store.add("Other", "x", timestamp=2)
    second = store.add("quantum error correction", "new", timestamp=3)

    items = store.list()
    assert [i.topic for i in items] == ["quantum error correction", "Other"]
    assert store.get(first.id) is None
    assert store.get(second.id).analysis == "new"

def test_unicode_topics_dedup_by_casefold(store):
    store.add("Über Schlafforschung", "old", timestamp=1)
    store.add("über schlafforschung", "new", timestamp=2)
    store.add("STRASSE", "x", timestamp=3)
    store.add("Straße", "y", timestamp=4)

    items = store.list()
    assert [i.topic for i in items] == ["Straße", "über schlafforschung"]
    assert items[1].analysis == "new"

def test_topic_key():
    assert topic_key("Über") == topic_key("über") == "über"
    assert topic_key("Straße") == "strasse"

def test_history_is_capped(store):
    for n in range(5):
        store.add(f"Topic {n}", "### x", timestamp=n)

    assert [i.topic for i in store.list()] == ["Topic 4", "Topic 3", "Topic 2"]

def test_list_limit(store):
    for n in range(3):
        store.add(f"Topic {n}", "### x", timestamp=n)
    assert len(store.list(limit=1)) == 1

def test_clear(store):
    store.add("Topic", "### x")
    store.clear()
    assert store.list() == []

def test_persists_to_file(tmp_path):
    url = f"sqlite:///{tmp_path / 'history.db'}"
    HistoryStore(url).add("Saved topic", "### Topic Overview\n")

    items = HistoryStore(url).list()
    assert [i.topic for i in items] == ["Saved topic"]
