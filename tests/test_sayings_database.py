import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from sayings_db.core.sayings_database import SayingsDatabase
from sayings_db.core.structures.avl_tree import DuplicateKeyError

SAYINGS = [
    ("Aloha kakahiaka", "Good morning"),
    ("Aloha ahiahi", "Good evening"),
    ("Mahalo nui loa", "Thank you very much"),
    ("Ua mau ke ea o ka ʻāina i ka pono", "The life of the land is perpetuated in righteousness"),
    ("ʻAʻohe pau ka ʻike i ka hālau hoʻokahi", "All knowledge is not taught in the same school"),
]

def test_load_and_query(capsys):
    print("--- Teste do Banco de Sayings ---")
    db = SayingsDatabase()

    loaded = db.load(SAYINGS + [("Aloha ahiahi", "Evening greetings")])
    out = capsys.readouterr().out

    # A duplicata é reportada e ignorada, o restante é carregado
    assert loaded == len(SAYINGS)
    assert len(db) == len(SAYINGS)
    assert SayingsDatabase.DUPLICATE_TAG in out
    assert "Aloha ahiahi" in out

    assert db.first().key == "Aloha ahiahi"
    assert db.last().key == "ʻAʻohe pau ka ʻike i ka hālau hoʻokahi"
    assert db.member("Mahalo nui loa")
    assert not db.member("Mahalo")
    assert db.successor("Aloha ahiahi").key == "Aloha kakahiaka"
    assert db.predecessor("Mahalo nui loa").key == "Aloha kakahiaka"

    keys = [s.key for s in db.all_sayings()]
    assert keys == sorted(keys)
    assert db.index.is_balanced()

def test_me_hua_and_sayings_with():
    db = SayingsDatabase()
    db.load(SAYINGS)

    assert {s.key for s in db.me_hua("Aloha")} == {"Aloha kakahiaka", "Aloha ahiahi"}
    assert {s.key for s in db.me_hua("ka")} == {
        "Aloha kakahiaka",
        "Ua mau ke ea o ka ʻāina i ka pono",
        "ʻAʻohe pau ka ʻike i ka hālau hoʻokahi",
    }
    assert [s.key for s in db.sayings_with("school")] == ["ʻAʻohe pau ka ʻike i ka hālau hoʻokahi"]
    assert db.sayings_with("goodbye") == []

def test_add_propagates_duplicate():
    db = SayingsDatabase()
    saying = db.add("Ohana", "Family")
    assert saying.translation == "Family"

    with pytest.raises(DuplicateKeyError):
        db.add("Ohana", "Family, extended")

    assert len(db) == 1
    assert db.all_sayings()[0].translation == "Family"
