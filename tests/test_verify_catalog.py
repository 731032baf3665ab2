import json
from verify_catalog import main


def test_builtin_catalog_verifies():
    assert main([]) == 0

def test_empty_directory_fails(tmp_path):
    assert main([str(tmp_path)]) == 1

def test_catalog_directory_verifies(tmp_path):
    (tmp_path / "shop.json").write_text(json.dumps(
        {"key": "Shop", "entries": [{"text": "Welcome in!"}]}
    ), encoding="utf-8")
    assert main([str(tmp_path)]) == 0

def test_blank_entry_fails(tmp_path):
    (tmp_path / "blank.json").write_text(json.dumps(
        {"key": "Blank", "entries": [{"text": "   "}]}
    ), encoding="utf-8")
    assert main([str(tmp_path)]) == 1
