# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
from typing import cast
from unittest import TestCase

from pymongo.monitoring import ServerOpeningEvent, ServerClosedEvent, ServerDescriptionChangedEvent

from resizerBootstrap.helpers.listeners.mongo.ServerLogger import ServerLogger


class ServerDescriptionEventMock:
    def __init__(self, server_type: str) -> None:
        self.server_type = server_type
        self.server_type_name = server_type


class ServerEventMock:
    """ Mock implementation of a ServerEvent. """
    server_address = ("mongo-primary", 27017)
    topology_id = 1

    def __init__(self, previous_type: str = "Standalone", new_type: str = "Standalone") -> None:
        self.previous_description = ServerDescriptionEventMock(previous_type)
        self.new_description = ServerDescriptionEventMock(new_type)


class TestServerLogger(TestCase):
    server_logger = ServerLogger()

    def test_opened(self):
        self.server_logger.opened(event=cast(ServerOpeningEvent, ServerEventMock()))

    def test_closed(self):
        self.server_logger.closed(event=cast(ServerClosedEvent, ServerEventMock()))

    def test_description_changed(self):
        event = ServerEventMock(previous_type="RSGhost", new_type="RSPrimary")
        with self.assertLogs(level="INFO") as logs:
            self.server_logger.description_changed(event=cast(ServerDescriptionChangedEvent, event))
        self.assertIn("changed type from RSGhost to RSPrimary", logs.output[0])

    def test_description_unchanged(self):
        with self.assertNoLogs(level="INFO"):
            self.server_logger.description_changed(event=cast(ServerDescriptionChangedEvent, ServerEventMock()))
