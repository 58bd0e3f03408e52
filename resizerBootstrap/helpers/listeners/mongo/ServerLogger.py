# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
import logging

from pymongo.monitoring import ServerDescriptionChangedEvent, ServerOpeningEvent, ServerClosedEvent, ServerListener


class ServerLogger(ServerListener):
    """ Logs how the bootstrapped node is seen by the client, e.g. when it turns into the primary. """

    def opened(self, event: ServerOpeningEvent) -> None:
        logging.debug("Server %s added to topology %s", event.server_address, event.topology_id)

    def description_changed(self, event: ServerDescriptionChangedEvent) -> None:
        """
        When the description of the server changed, e.g. after the replica set was initiated.
        :param event: The event.
        """
        previous_server_type = event.previous_description.server_type
        new_server_type = event.new_description.server_type
        if new_server_type != previous_server_type:
            logging.info("Server %s changed type from %s to %s", event.server_address,
                         event.previous_description.server_type_name, event.new_description.server_type_name)

    def closed(self, event: ServerClosedEvent) -> None:
        logging.debug("Server %s removed from topology %s", event.server_address, event.topology_id)
