"""
Request token parser

Turns console tokens into hallway or cabin requests and hands them to the
dispatcher:

    "5"   -> cabin request for floor 5
    "3U"  -> hallway request at floor 3, going up
    "12d" -> hallway request at floor 12, going down
"""

import re
from typing import Union

from simulator.core.requests import CabinRequest, HallwayRequest
from simulator.core.sensor import Direction
from simulator.exceptions import InvalidRequestError
from simulator.interfaces.call_system import ICallSystem

TOKEN_PATTERN = re.compile(r'^(\d+)([UD])?$')


class RequestParser:
    """
    Input collaborator between the console and the dispatcher.

    Only requests that a real button in the building could produce are
    forwarded; anything else is rejected before it reaches the dispatcher.
    """

    def __init__(self, dispatcher, call_system: ICallSystem):
        """
        Args:
            dispatcher: Object with add_hallway_request() and add_cabin_request()
            call_system: Describes which floors and hall buttons exist
        """
        self.dispatcher = dispatcher
        self.call_system = call_system

    def parse(self, token: str) -> Union[HallwayRequest, CabinRequest]:
        """
        Parse one request token

        Raises:
            InvalidRequestError: Malformed token, unknown floor or missing
                hall button
        """
        cleaned = token.strip().upper()
        match = TOKEN_PATTERN.match(cleaned)
        if not match:
            raise InvalidRequestError(f"Malformed request '{token.strip()}'")

        floor = int(match.group(1))
        if not self.call_system.is_valid_floor(floor):
            raise InvalidRequestError(
                f"Floor {floor} is outside {self.call_system.get_lowest_floor()}-{self.call_system.get_top_floor()}"
            )

        if match.group(2) is None:
            return CabinRequest(floor)

        direction = Direction.from_token(match.group(2))
        if not self.call_system.has_hall_button(floor, direction):
            raise InvalidRequestError(f"Floor {floor} has no {direction.value} hall button")
        return HallwayRequest(floor, direction)

    def submit(self, token: str) -> bool:
        """
        Parse a token and forward it to the dispatcher

        Returns:
            True if a request was added, False if the token was ignored
        """
        try:
            request = self.parse(token)
        except InvalidRequestError as e:
            print(f"[RequestParser] Ignored: {e}")
            return False

        if isinstance(request, HallwayRequest):
            self.dispatcher.add_hallway_request(request.floor, request.direction)
        else:
            self.dispatcher.add_cabin_request(request.floor)
        return True
