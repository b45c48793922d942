"""Tests for dungeon_lib.repl.loop module."""

import pytest

from dungeon_lib.errors import TransportError
from dungeon_lib.repl.loop import FAREWELL


class TestSessionLifecycle:
    def test_quit(self, make_session, capsys):
        session = make_session(["q"])
        assert session.run() == 0
        assert FAREWELL in capsys.readouterr().out

    def test_end_of_input_ends_session(self, make_session, capsys):
        session = make_session([])
        assert session.run() == 0
        assert FAREWELL in capsys.readouterr().out

    def test_room_described_on_entry(self, make_session, capsys):
        make_session(["q"]).run()
        out = capsys.readouterr().out
        assert "'cli/cli'" in out
        assert "down arrow" in out
        assert "up arrow" not in out

    def test_blank_lines_ignored(self, make_session, provider):
        session = make_session(["", "   ", "q"])
        assert session.run() == 0
        assert provider.calls == [("", None)]

    def test_help(self, make_session, capsys):
        make_session(["?", "q"]).run()
        assert "Supported verbs" in capsys.readouterr().out

    def test_prompt_tracks_position(self, make_session):
        session = make_session(["go down", "q"], ["internal"])
        session.run()
        assert "cli/cli> " in session.repl.prompts
        assert "cli/cli/internal> " in session.repl.prompts


class TestInterrupts:
    def test_interrupt_while_fetching(self, make_session, provider):
        provider.failures = [KeyboardInterrupt()]
        session = make_session(["q"])
        assert session.run() == 0
        assert provider.calls == [("", None), ("", None)]

    def test_interrupt_while_reading_paper(self, make_session, capsys):
        def interrupted_pager(title, text):
            raise KeyboardInterrupt

        session = make_session(["examine", "look", "q"], ["README.md", "read it"])
        session.pager = interrupted_pager
        assert session.run() == 0
        assert FAREWELL in capsys.readouterr().out
        assert not session.repl.lines


class TestUnknownCommands:
    def test_hint_printed(self, make_session, capsys):
        session = make_session(["go sideways", "q"])
        assert session.run() == 0
        assert "hint: try 'go down' or 'go up'" in capsys.readouterr().out

    def test_no_hint(self, make_session, capsys):
        make_session(["dance", "q"]).run()
        out = capsys.readouterr().out
        assert "i did not understand" in out
        assert "hint:" not in out

    def test_unknown_command_does_not_move(self, make_session):
        session = make_session(["gone", "q"])
        session.run()
        assert session.state.path == ()


class TestGo:
    def test_down_then_up(self, make_session, provider):
        session = make_session(["go down", "go up", "q"], ["internal"])
        assert session.run() == 0
        assert session.state.path == ()
        assert provider.calls == [("", None), ("internal", None), ("", None)]

    def test_down_offers_subdirectories(self, make_session):
        session = make_session(["go down", "q"], ["internal"])
        session.run()
        assert session.repl.offered[0] == ["docs", "internal"]
        assert session.state.path == ("internal",)

    def test_up_at_root(self, make_session, capsys):
        session = make_session(["go up", "q"])
        assert session.run() == 0
        assert "can't find one" in capsys.readouterr().out
        assert session.state.path == ()

    def test_cancelled_selection(self, make_session, capsys):
        session = make_session(["go down", "q"], [None])
        assert session.run() == 0
        assert "you change your mind" in capsys.readouterr().out
        assert session.state.path == ()

    def test_no_way_down(self, make_session, capsys):
        session = make_session(["go down", "go down", "q"], ["docs"])
        session.run()
        assert "no door leading down" in capsys.readouterr().out
        assert session.state.path == ("docs",)


class TestExamine:
    def test_nothing_to_examine(self, make_session, capsys):
        session = make_session(["go down", "examine", "q"], ["docs"])
        session.run()
        assert "don't see anything to examine" in capsys.readouterr().out

    def test_read_paper(self, make_session, pager, capsys):
        session = make_session(["examine", "q"], ["README.md", "read it"])
        session.run()
        assert "holding a paper titled README.md" in capsys.readouterr().out
        assert pager.shown == [("README.md", "# cli\n")]

    def test_read_nested_paper(self, make_session, pager):
        session = make_session(["go down", "examine", "q"], ["internal", "api.go", "read it"])
        session.run()
        assert pager.shown == [("api.go", "package api\n")]

    def test_put_it_down(self, make_session, pager):
        session = make_session(["examine", "q"], ["README.md", "put it down"])
        session.run()
        assert pager.shown == []

    def test_read_at_historical_ref(self, make_session, pager):
        session = make_session(["shift back", "examine", "q"], ["README.md", "read it"])
        session.run()
        assert pager.shown == [("README.md", "# old cli\n")]


class TestShift:
    def test_shift_back(self, make_session, provider):
        session = make_session(["shift back", "look", "q"])
        assert session.run() == 0
        assert session.state.ref == "c2"
        assert provider.calls == [("", None), ("", "c2")]

    def test_shift_back_twice(self, make_session):
        session = make_session(["shift back", "shift back", "q"])
        session.run()
        assert session.state.ref == "c1"

    def test_no_prior_history(self, make_session, capsys):
        session = make_session(["go down", "go down", "shift back", "q"], ["internal", "pkg"])
        assert session.run() == 0
        assert "the past here is blank" in capsys.readouterr().out
        assert session.state.ref is None
        assert session.state.path == ("internal", "pkg")

    def test_shift_forward_without_history(self, make_session, capsys):
        session = make_session(["shift forward", "q"])
        assert session.run() == 0
        assert "refuses to come into view" in capsys.readouterr().out
        assert session.state.ref is None

    def test_shift_forward_after_back(self, make_session, provider):
        session = make_session(["shift back", "shift forward", "q"])
        session.run()
        assert session.state.ref is None
        assert provider.calls == [("", None), ("", "c2"), ("", None)]


class TestLostInTimeAndSpace:
    def test_vanished_path_resets_to_root(self, make_session, provider, capsys):
        provider.vanished.add("internal")
        session = make_session(["go down", "q"], ["internal"])
        assert session.run() == 0
        assert session.state.path == ()
        assert provider.calls == [("", None), ("internal", None), ("", None)]
        assert provider.calls.count(("internal", None)) == 1
        assert "lost in time and space" in capsys.readouterr().out

    def test_descend_into_directory_missing_in_the_past(self, make_session, provider):
        # internal/pkg does not exist at c2
        session = make_session(["go down", "go down", "shift back", "q"], ["internal", "pkg"])
        provider.history["internal/pkg"] = ["c3", "c2"]
        assert session.run() == 0
        assert session.state.path == ()
        assert session.state.ref == "c2"

    def test_unknown_start_ref_falls_back_to_latest(self, make_session, provider, capsys):
        session = make_session(["q"], ref="no-such-ref")
        assert session.run() == 0
        assert session.state.ref is None
        assert provider.calls == [("", "no-such-ref"), ("", None)]
        assert "back in the present" in capsys.readouterr().out

    def test_missing_repository_is_fatal(self, make_session, provider, capsys):
        provider.vanished.add("")
        session = make_session(["q"])
        assert session.run() == 1
        assert "right repository" in capsys.readouterr().out


class TestTransportErrors:
    def test_retry_then_succeed(self, make_session, provider, capsys):
        provider.failures = [TransportError("connection reset")]
        session = make_session(["q"], max_retries=2)
        assert session.run() == 0
        assert len(provider.calls) == 2
        assert "retry 1 of 2" in capsys.readouterr().out

    def test_retries_exhausted(self, make_session, provider, capsys):
        provider.failures = [TransportError("connection reset")] * 3
        session = make_session(["q"], max_retries=2)
        assert session.run() == 1
        assert len(provider.calls) == 3
        assert "connection reset" in capsys.readouterr().out

    def test_failed_refetch_leaves_cache_invalid(self, make_session, provider):
        session = make_session(["go down", "q"], ["internal"], max_retries=0)
        session.step()
        provider.failures = [TransportError("timeout")]
        with pytest.raises(TransportError):
            session.step()
        assert session.state.listing is None
        assert session.state.path == ("internal",)

    def test_no_retries(self, make_session, provider):
        provider.failures = [TransportError("boom")]
        session = make_session(["q"], max_retries=0)
        assert session.run() == 1
        assert len(provider.calls) == 1
