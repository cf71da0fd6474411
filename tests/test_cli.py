"""Tests for the command line interface."""

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


class TestDealCommand:

    def test_deal(self):
        result = runner.invoke(app, ["deal", "--seed", "1"])
        assert result.exit_code == 0
        assert "To call" in result.output
        assert "Best action" not in result.output

    def test_deal_reveal(self):
        result = runner.invoke(app, ["deal", "--seed", "1", "--reveal"])
        assert result.exit_code == 0
        assert "Best action" in result.output

    def test_verbose_logs_the_deal(self):
        result = runner.invoke(app, ["deal", "--seed", "1", "--verbose"])
        assert result.exit_code == 0
        assert "DEBUG" in result.output
        assert "dealt" in result.output

    def test_quiet_by_default(self):
        result = runner.invoke(app, ["deal", "--seed", "1"])
        assert result.exit_code == 0
        assert "dealt" not in result.output


class TestEvaluateCommand:

    def test_verbose_logs_the_decision(self):
        result = runner.invoke(app, ["evaluate", "As Ah", "--pot", "20", "--bet", "5",
                                     "--verbose"])
        assert result.exit_code == 0
        assert "strength=92" in result.output

    def test_evaluate_and_grade(self):
        result = runner.invoke(app, ["evaluate", "As Ah", "--pot", "20", "--bet", "5",
                                     "--action", "raise"])
        assert result.exit_code == 0
        assert "RAISE" in result.output
        assert "Correct!" in result.output
        assert "A+" in result.output

    def test_evaluate_with_board(self):
        result = runner.invoke(app, ["evaluate", "7h 2d", "--board", "Kc 9s 4d",
                                     "--pot", "10", "--bet", "30"])
        assert result.exit_code == 0
        assert "FOLD" in result.output

    def test_bad_card(self):
        result = runner.invoke(app, ["evaluate", "Xs Ah", "--pot", "10", "--bet", "5"])
        assert result.exit_code == 1

    def test_bad_board_size(self):
        result = runner.invoke(app, ["evaluate", "As Ah", "--board", "Kc 9s",
                                     "--pot", "10", "--bet", "5"])
        assert result.exit_code == 1

    def test_duplicate_card(self):
        result = runner.invoke(app, ["evaluate", "As Ah", "--board", "As 9s 4d",
                                     "--pot", "10", "--bet", "5"])
        assert result.exit_code == 1

    def test_bad_action(self):
        result = runner.invoke(app, ["evaluate", "As Ah", "--pot", "10", "--bet", "5",
                                     "--action", "check"])
        assert result.exit_code == 1


class TestTrainCommand:

    def test_play_two_hands(self):
        result = runner.invoke(app, ["train", "--count", "2", "--seed", "3"], input="c\nf\n")
        assert result.exit_code == 0
        assert "Hand 2/2" in result.output
        assert "Training Stats" in result.output

    def test_invalid_then_valid(self):
        result = runner.invoke(app, ["train", "--count", "1", "--seed", "3"], input="x\ncall\n")
        assert result.exit_code == 0
        assert "Unknown action" in result.output
        assert "Training Stats" in result.output

    def test_quit(self):
        result = runner.invoke(app, ["train", "--count", "3", "--seed", "3"], input="q\n")
        assert result.exit_code == 0
        assert "Training session ended" in result.output
        assert "Training Stats" not in result.output
