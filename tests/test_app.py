"""Tests for the app module."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from src.app.pages.team_builder import SORT_OPTIONS, _build_player, _sort_catalog
from src.app.seed import create_catalog, create_sample_players
from src.models import Player, Position, Roster, Stats


class TestSamplePlayers:
    """Tests for the sample catalog."""

    def test_returns_seven_players(self) -> None:
        """Should return the seven sample players in order."""
        players = create_sample_players()
        assert [p.name for p in players] == [
            "Mbappe", "Haaland", "Salah", "Messi", "De Bruyne", "Van Dijk", "Courtois",
        ]

    def test_all_players_valid(self) -> None:
        """All players should be valid Player objects."""
        for player in create_sample_players():
            assert isinstance(player, Player)
            assert isinstance(player.position, Position)
            assert player.market_value > 0
            assert player.club

    def test_has_every_position(self) -> None:
        """Should cover all four roles."""
        positions = {p.position for p in create_sample_players()}
        assert positions == set(Position)

    def test_fresh_instances(self) -> None:
        """Each call should build new player objects."""
        first, second = create_sample_players(), create_sample_players()
        assert all(a is not b for a, b in zip(first, second))

    def test_mbappe_stats(self) -> None:
        """Spot check one record."""
        mbappe = create_sample_players()[0]
        assert mbappe.stats == Stats(98, 85, 90, 92)
        assert mbappe.market_value == 180
        assert mbappe.club == "PSG"


class TestCreateCatalog:
    """Tests for catalog construction."""

    def test_seeded(self) -> None:
        """Seeded catalog holds the sample players."""
        assert create_catalog().size == 7

    def test_empty(self) -> None:
        """Unseeded catalog is empty."""
        assert create_catalog(seed=False).size == 0


class TestSortCatalog:
    """Tests for the page sort selector."""

    @pytest.fixture
    def catalog(self) -> Roster:
        return create_catalog()

    def test_current_order_unchanged(self, catalog: Roster) -> None:
        """'Current order' should keep the roster as is."""
        before = list(catalog.players)
        _sort_catalog(catalog, "Current order")
        assert catalog.players == before

    def test_price_descending(self, catalog: Roster) -> None:
        """Price descending puts the most expensive first."""
        _sort_catalog(catalog, "Price (descending)")
        assert catalog.players[0].name == "Mbappe"
        assert catalog.players[-1].name == "Courtois"

    def test_rating(self, catalog: Roster) -> None:
        """Rating puts the best scorer first."""
        _sort_catalog(catalog, "Rating")
        scores = [p.stats.score for p in catalog]
        assert scores == sorted(scores, reverse=True)

    def test_every_option_known(self, catalog: Roster) -> None:
        """All options should sort without error."""
        for option in SORT_OPTIONS:
            _sort_catalog(catalog, option)
        assert catalog.size == 7


class TestBuildPlayer:
    """Tests for the add-player form conversion."""

    def test_build_player(self) -> None:
        """Form values should become a Player."""
        player = _build_player("Pedri", "Spain", 21, "Midfielder", 80.5, "Barcelona", 80, 85, 92, 78)

        assert player.name == "Pedri"
        assert player.age == 21
        assert player.position == Position.MIDFIELDER
        assert player.market_value == 80.5
        assert player.stats.score == 83.75


APP_PATH = Path(__file__).resolve().parents[1] / "src" / "app" / "main.py"


class TestAddPlayerForm:
    """Tests for the add-player form on the running page."""

    @pytest.fixture
    def app(self) -> AppTest:
        app = AppTest.from_file(str(APP_PATH))
        app.run()
        return app

    @staticmethod
    def _submit(app: AppTest) -> None:
        next(b for b in app.button if b.label == "Add player").click().run()

    def test_new_player_rendered_after_submit(self, app: AppTest) -> None:
        """A submitted player should show up in the catalog right away."""
        app.text_input[0].input("Pedri")
        self._submit(app)

        assert not app.exception
        assert app.session_state["catalog"].size == 8
        rows = [c.value for c in app.code]
        assert any(row.startswith("7. Pedri") for row in rows)
        assert any("Pedri added!" in s.value for s in app.success)

    def test_new_player_follows_selected_sort(self, app: AppTest) -> None:
        """A submitted player should be placed by the active sort."""
        app.selectbox(key="sort_option").select("Name").run()
        app.text_input[0].input("Aaron")
        self._submit(app)

        rows = [c.value for c in app.code]
        assert rows[0].startswith("0. Aaron")

    def test_empty_name_warns(self, app: AppTest) -> None:
        """Submitting without a name should warn and add nothing."""
        self._submit(app)

        assert app.session_state["catalog"].size == 7
        assert any("Enter a name" in w.value for w in app.warning)
