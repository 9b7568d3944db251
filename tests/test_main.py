# tests/test_main.py
import sys

from sic2lp.__main__ import main


def test_main_dispatch_to_cli(mocker):
    """验证 'python -m sic2lp' 分发到 cli 模块"""
    mocker.patch.object(sys, "argv", ["sic2lp", "-db", "export.xml"])
    mock_cli = mocker.patch("sic2lp.cli.main")

    main()
    mock_cli.assert_called_once()
