import pytest

from simulator.core.requests import CabinRequest, HallwayRequest
from simulator.core.sensor import Direction
from simulator.exceptions import InvalidRequestError
from simulator.implementations.traditional.call_system import TraditionalCallSystem
from simulator.implementations.traditional.request_parser import RequestParser


@pytest.fixture
def call_system():
    return TraditionalCallSystem(num_floors=12)


@pytest.fixture
def parser(dispatcher, call_system):
    return RequestParser(dispatcher, call_system)


class TestTraditionalCallSystem:
    def test_buttons_at_each_floor(self, call_system):
        assert call_system.get_available_directions(1) == [Direction.UP]
        assert call_system.get_available_directions(6) == [Direction.UP, Direction.DOWN]
        assert call_system.get_available_directions(12) == [Direction.DOWN]
        assert call_system.get_available_directions(13) == []

    def test_floor_range_with_raised_ground_floor(self):
        call_system = TraditionalCallSystem(num_floors=5, lowest_floor=2)
        assert call_system.get_top_floor() == 6
        assert not call_system.is_valid_floor(1)
        assert call_system.is_valid_floor(6)
        assert call_system.has_hall_button(2, Direction.UP)
        assert not call_system.has_hall_button(2, Direction.DOWN)

    def test_invalid_building(self):
        with pytest.raises(ValueError):
            TraditionalCallSystem(num_floors=1)


class TestParse:
    @pytest.mark.parametrize("token, expected", [
        ("5", CabinRequest(5)),
        ("3U", HallwayRequest(3, Direction.UP)),
        ("8d", HallwayRequest(8, Direction.DOWN)),
        ("  11U ", HallwayRequest(11, Direction.UP)),
        ("12", CabinRequest(12)),
    ])
    def test_valid_tokens(self, parser, token, expected):
        assert parser.parse(token) == expected

    @pytest.mark.parametrize("token", ["", "U", "5X", "5UD", "-3", "3 U", "five"])
    def test_malformed_tokens(self, parser, token):
        with pytest.raises(InvalidRequestError):
            parser.parse(token)

    @pytest.mark.parametrize("token", ["0", "13", "13D"])
    def test_floor_outside_building(self, parser, token):
        with pytest.raises(InvalidRequestError):
            parser.parse(token)

    @pytest.mark.parametrize("token", ["1D", "12U"])
    def test_missing_hall_button(self, parser, token):
        with pytest.raises(InvalidRequestError):
            parser.parse(token)


class TestSubmit:
    def test_forwards_requests_to_dispatcher(self, parser, dispatcher, event_log):
        assert parser.submit("5")
        assert parser.submit("3u")

        assert [r.floor for r in dispatcher.ledger.cabin_requests] == [5]
        assert [r.token for r in dispatcher.ledger.hallway_requests] == ["3U"]
        assert event_log.messages == [
            "Inside floor 5 request added.",
            "Outside floor 3 UP request added.",
        ]

    def test_invalid_token_is_ignored(self, parser, dispatcher, event_log):
        assert not parser.submit("99Z")
        assert not parser.submit("1D")

        assert dispatcher.ledger.is_empty()
        assert event_log.messages == []
