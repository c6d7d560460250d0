from unittest.mock import patch

from modules import questionary as prompt


def test_build_confirmation_message(anvil_config):
    message = prompt.build_confirmation_message(
        anvil_config,
        "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
        ["0xAAA", "0xBBB", ""],
        100,
        1000,
    )

    assert "ANVIL" in message
    assert "0x5FbD...180aa3" in message
    assert "0xf39F...b92266" in message
    assert "100 ETH" in message
    assert "1000 ETH" in message


def test_confirm_distribution_cancelled(anvil_config):
    with patch.object(prompt.questionary, "confirm") as confirm:
        confirm.return_value.ask.return_value = None
        assert not prompt.confirm_distribution(anvil_config, "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266", [], 1, 1)
