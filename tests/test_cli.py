"""
Smoke tests for the command line and the reporting helpers.
"""

import pytest

from locus.__main__ import main
from locus.core.state import FactStore
from locus.domains.rooms import make_room_store
from locus.visualization import export_dot, print_store


class TestMain:
    def test_rooms_domain(self, capsys):
        main(["--domain", "rooms", "--quiet"])
        out = capsys.readouterr().out
        assert "QED: locatedIn apple garden is FALSE." in out
        assert "QED: locatedIn apple kitchen is TRUE." in out
        assert "No proof found." in out

    def test_animals_domain(self, capsys):
        main(["--domain", "animals", "--quiet"])
        out = capsys.readouterr().out
        assert "lily: ?x = white  [type_induction, score 0.35]" in out
        assert "bernhard: no answer" in out
        assert "mittens: ?x = grey  [direct, score 1.0]" in out

    def test_prove_flag(self, capsys):
        main(["--prove", "locatedIn key kitchen", "--quiet"])
        out = capsys.readouterr().out
        assert "disjoint_check: bedroom is disjoint from kitchen" in out

    def test_query_with_min_support(self, capsys):
        main(["--domain", "animals", "--query", "lily", "--min-support", "3", "--quiet"])
        assert "lily: no answer" in capsys.readouterr().out

    def test_chain_flag(self, capsys):
        main(["--chain", "apple", "--quiet"])
        assert "apple: basket -> kitchen" in capsys.readouterr().out

    def test_empty_goal_is_usage_error(self):
        with pytest.raises(SystemExit):
            main(["--prove", "   ", "--quiet"])

    def test_save_then_load(self, tmp_path, capsys):
        path = str(tmp_path / "facts.json")
        main(["--domain", "rooms", "--save", path, "--quiet"])
        assert FactStore.load(path).facts == make_room_store().facts
        main(["--load", path, "--prove", "locatedIn apple garden", "--quiet"])
        assert "is FALSE" in capsys.readouterr().out

    def test_load_alone_runs_no_domain_goals(self, tmp_path, capsys):
        path = str(tmp_path / "facts.json")
        main(["--domain", "animals", "--save", path, "--quiet"])
        capsys.readouterr()
        main(["--load", path, "--quiet"])
        out = capsys.readouterr().out
        assert "Loaded" in out
        assert "Goal:" not in out
        assert "Query:" not in out
        assert "QED" not in out


class TestVisualization:
    def test_export_dot(self, tmp_path):
        path = str(tmp_path / "graph.dot")
        export_dot(make_room_store(), path)
        with open(path) as f:
            text = f.read()
        assert text.startswith("digraph locus {")
        assert '"apple" -> "basket";' in text
        assert "isA" not in text

    def test_print_store(self, capsys):
        print_store(FactStore(facts=[("isA", "a", "T")]))
        assert "isA a T" in capsys.readouterr().out
