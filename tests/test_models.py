# tests/test_models.py

from __future__ import annotations

from todoist_deck.core.models import ButtonConfig, GlobalCredentials


def test_button_config_from_empty_settings() -> None:
    cfg = ButtonConfig.from_settings(None)
    assert cfg.item_name == ""
    assert cfg.item_filter == ""
    assert not cfg.g_ladder.active
    assert not cfg.b_ladder.active


def test_button_config_reads_wire_names() -> None:
    cfg = ButtonConfig.from_settings(
        {
            "item_name": "Overdue",
            "item_filter": "overdue & #Work",
            "b_cutoff_1": "5",
            "b_cutoff_2": 2.5,
            "b_cutoff_3": None,
            "b_color_1": "purple",
        }
    )
    assert cfg.item_name == "Overdue"
    assert cfg.item_filter == "overdue & #Work"
    assert cfg.b_ladder.cutoffs == (5.0, 2.5, None)
    assert cfg.b_ladder.colors == ("purple", None, None, None)
    assert cfg.b_ladder.active
    assert not cfg.g_ladder.active


def test_non_numeric_and_boolean_cutoffs_are_unset() -> None:
    cfg = ButtonConfig.from_settings({"g_cutoff_1": "lots", "g_cutoff_2": True})
    assert cfg.g_ladder.cutoffs == (None, None, None)


def test_global_credentials_token() -> None:
    assert GlobalCredentials.from_settings({"apiToken": " abc "}).api_token == "abc"
    assert GlobalCredentials.from_settings({}).api_token == ""
    assert GlobalCredentials.from_settings(None).api_token == ""
