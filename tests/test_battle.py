"""
Battle Detection Tests

Run:
----
    pytest tests/test_battle.py -v
"""

import pytest

from bandhub.matching import is_battle_video


class TestBattleKeywords:
    @pytest.mark.parametrize(
        "text",
        [
            "JSU VS Southern",
            "jsu vs southern",
            "Jsu Vs. Southern",
            "Jackson State v. Grambling",
            "Jackson State versus Grambling",
            "2024 Battle of the Bands",
            "BOTB highlights",
            "Stand SHOWDOWN",
            "Drum major face off",
            "Drumline faceoff",
        ],
    )
    def test_battle_text(self, text):
        assert is_battle_video(text)

    @pytest.mark.parametrize(
        "text",
        [
            "Jackson State homecoming halftime",
            "Southern University marching in",
            "Vsauce reacts",
            "",
        ],
    )
    def test_not_battle_text(self, text):
        assert not is_battle_video(text)
