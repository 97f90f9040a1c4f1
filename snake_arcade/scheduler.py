"""
Timers driving the game

Two timers exist: the recurring game ticker and the one-shot special food
expiry. Both are pygame timers posting user events, so their callbacks are
delivered through the same event queue as keyboard and mouse input and never
interleave with each other.
"""

import logging
from typing import Optional

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
SPECIAL_FOOD_EXPIRED = pygame.USEREVENT + 2


class Scheduler:
    """Owns the ticker and expiry handles; subclasses arm the real timers"""

    def __init__(self):
        self.tick_interval: Optional[int] = None
        self.expiry_serial: Optional[int] = None

    @property
    def ticking(self) -> bool:
        return self.tick_interval is not None

    def start_ticker(self, interval_ms: int):
        """Replace any running ticker with one firing every interval_ms"""
        self.stop_ticker()
        self._arm_ticker(interval_ms)
        self.tick_interval = interval_ms

    def stop_ticker(self):
        if self.tick_interval is not None:
            self._disarm_ticker()
            self.tick_interval = None

    def start_expiry(self, delay_ms: int, serial: int):
        """One-shot expiry for the special food identified by serial"""
        self.cancel_expiry()
        self._arm_expiry(delay_ms, serial)
        self.expiry_serial = serial

    def cancel_expiry(self):
        if self.expiry_serial is not None:
            self._disarm_expiry()
            self.expiry_serial = None

    def expiry_fired(self, serial: int):
        """Forget the handle once its event has been delivered"""
        if self.expiry_serial == serial:
            self.expiry_serial = None

    def _arm_ticker(self, interval_ms: int):
        raise NotImplementedError

    def _disarm_ticker(self):
        raise NotImplementedError

    def _arm_expiry(self, delay_ms: int, serial: int):
        raise NotImplementedError

    def _disarm_expiry(self):
        raise NotImplementedError


class PygameScheduler(Scheduler):
    """Scheduler backed by pygame.time.set_timer"""

    def _arm_ticker(self, interval_ms: int):
        logger.debug("Ticker armed at %d ms", interval_ms)
        pygame.time.set_timer(TICK_EVENT, interval_ms)

    def _disarm_ticker(self):
        pygame.time.set_timer(TICK_EVENT, 0)
        # Ticks already queued by the old timer belong to it too
        pygame.event.clear(TICK_EVENT)

    def _arm_expiry(self, delay_ms: int, serial: int):
        event = pygame.event.Event(SPECIAL_FOOD_EXPIRED, serial=serial)
        pygame.time.set_timer(event, delay_ms, loops=1)

    def _disarm_expiry(self):
        pygame.time.set_timer(SPECIAL_FOOD_EXPIRED, 0)
        pygame.event.clear(SPECIAL_FOOD_EXPIRED)
