"""Small stateful data structures."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from operator import itemgetter


class HashSet:
    """A set of integer keys."""

    def __init__(self) -> None:
        self._keys: set[int] = set()

    def add(self, key: int) -> None:
        self._keys.add(key)

    def remove(self, key: int) -> None:
        self._keys.discard(key)

    def contains(self, key: int) -> bool:
        return key in self._keys

    def __contains__(self, key: object) -> bool:
        return key in self._keys


class SnapshotArray:
    """An array of integers, initially zero, whose states can be snapshotted."""

    def __init__(self, length: int) -> None:
        self._history: list[list[tuple[int, int]]] = [[] for _ in range(length)]
        self._snap_id = 0

    def set(self, index: int, val: int) -> None:
        history = self._history[index]
        if history and history[-1][0] == self._snap_id:
            history[-1] = (self._snap_id, val)
        else:
            history.append((self._snap_id, val))

    def snap(self) -> int:
        """Take a snapshot and return its id."""
        self._snap_id += 1
        return self._snap_id - 1

    def get(self, index: int, snap_id: int) -> int:
        """Value at ``index`` as of snapshot ``snap_id``."""
        history = self._history[index]
        position = bisect_right(history, snap_id, key=itemgetter(0))
        return history[position - 1][1] if position else 0


class UndergroundSystem:
    """Tracks journeys between stations and their average durations."""

    def __init__(self) -> None:
        self._open: dict[int, tuple[str, int]] = {}
        self._routes: dict[tuple[str, str], tuple[int, int]] = {}

    def check_in(self, customer_id: int, station_name: str, t: int) -> None:
        self._open[customer_id] = (station_name, t)

    def check_out(self, customer_id: int, station_name: str, t: int) -> None:
        try:
            start_station, start_time = self._open.pop(customer_id)
        except KeyError:
            raise KeyError(f"customer {customer_id} is not checked in") from None
        route = (start_station, station_name)
        count, total = self._routes.get(route, (0, 0))
        self._routes[route] = (count + 1, total + t - start_time)

    def get_average_time(self, start_station: str, end_station: str) -> float:
        """Mean duration of completed journeys from one station to another."""
        try:
            count, total = self._routes[(start_station, end_station)]
        except KeyError:
            raise KeyError(f"no journeys from {start_station!r} to {end_station!r}") from None
        return total / count


class ParkingSystem:
    """A car park with a fixed number of big, medium and small spaces."""

    def __init__(self, big: int, medium: int, small: int) -> None:
        self._free = [big, medium, small]

    def add_car(self, car_type: int) -> bool:
        """Park a car of type 1 (big), 2 (medium) or 3 (small); False if no space."""
        if not 1 <= car_type <= 3:
            raise ValueError(f"car type must be 1, 2 or 3, not {car_type}")
        slot = car_type - 1
        if self._free[slot] > 0:
            self._free[slot] -= 1
            return True
        return False


class SeatManager:
    """Hands out the lowest-numbered free seat among seats 1 to n."""

    def __init__(self, n: int) -> None:
        self._free = list(range(1, n + 1))
        self._free_set = set(self._free)

    def reserve(self) -> int:
        if not self._free:
            raise IndexError("no seats available")
        seat = heapq.heappop(self._free)
        self._free_set.discard(seat)
        return seat

    def unreserve(self, seat_number: int) -> None:
        if seat_number not in self._free_set:
            self._free_set.add(seat_number)
            heapq.heappush(self._free, seat_number)