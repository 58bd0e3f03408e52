# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
import logging
from time import sleep
from typing import Dict, List, Optional

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure

from resizerBootstrap.helpers.MongoResources import MongoResources
from resizerBootstrap.helpers.listeners.mongo.CommandLogger import CommandLogger
from resizerBootstrap.helpers.listeners.mongo.ServerLogger import ServerLogger
from resizerBootstrap.models.V1ReplicaSetConfig import V1ReplicaSetConfig


class MongoService:
    """
    Bundled methods for bootstrapping MongoDB.
    Administrative commands are sent once. Whatever MongoDB answers or raises is passed on to the caller.
    """

    # right after the containers start the node may not accept connections yet.
    # below we can configure how many times we ping it and how long we wait in between.
    MONGO_COMMAND_RETRIES = 4
    MONGO_COMMAND_WAIT = 15.0

    def __init__(self, client: MongoClient) -> None:
        """
        :param client: The client connected to the node that should become the primary.
        """
        self._client = client

    @staticmethod
    def createClient(url: str, connect_timeout_ms: int) -> MongoClient:
        """
        Creates a new MongoClient instance that logs the commands and server changes.
        :param url: The MongoDB connection string.
        :param connect_timeout_ms: The connection and server selection timeout, in milliseconds.
        :return: The mongo client.
        """
        return MongoClient(
            url,
            connectTimeoutMS = connect_timeout_ms,
            serverSelectionTimeoutMS = connect_timeout_ms,
            event_listeners = [CommandLogger(), ServerLogger()]
        )

    def waitForServer(self) -> None:
        """
        Waits until the MongoDB server answers to a ping command.
        :raise TimeoutError: If we could not connect after retrying.
        """
        ping_command = MongoResources.createPingCommand()
        for attempt in range(1, self.MONGO_COMMAND_RETRIES + 1):
            try:
                self._client.admin.command(ping_command)
                logging.debug("MongoDB answered on attempt %s/%s", attempt, self.MONGO_COMMAND_RETRIES)
                return
            except ConnectionFailure as err:
                logging.error("Exception while trying to connect to Mongo: %s", str(err))
            logging.info("Ping failed, waiting %s seconds before trying again (attempt %s/%s)",
                         self.MONGO_COMMAND_WAIT, attempt, self.MONGO_COMMAND_RETRIES)
            sleep(self.MONGO_COMMAND_WAIT)

        raise TimeoutError("Could not reach MongoDB after {} retries!".format(self.MONGO_COMMAND_RETRIES))

    def initiateReplicaSet(self, replica_set: V1ReplicaSetConfig) -> Optional[Dict[str, any]]:
        """
        Initializes the replica set by sending a `replSetInitiate` command to the connected node.
        :param replica_set: The replica set topology.
        :return: The response from MongoDB.
        :raise OperationFailure: If MongoDB refuses the configuration, e.g. when it was already initiated.
        """
        initiate_command, initiate_config = MongoResources.createReplicaInitiateCommand(replica_set)
        logging.info("Initiating replica set %s with %s members", replica_set.id, len(replica_set.members))
        response = self._client.admin.command(initiate_command, initiate_config)
        logging.debug("Initiating replica set, received %s", repr(response))
        return response

    def ensureCollections(self, database_name: str, collection_names: List[str]) -> None:
        """
        Creates the given collections, in order. Existing collections are not checked for.
        :param database_name: The name of the database.
        :param collection_names: The names of the collections.
        :raise OperationFailure: If MongoDB refuses to create one of the collections.
        """
        database = self._client[database_name]
        for collection_name in collection_names:
            database.create_collection(collection_name, check_exists=False)
            logging.info("Created collection %s.%s", database_name, collection_name)

    def createSliceIndexes(self, database_name: str) -> List[str]:
        """
        Creates the indexes the registry needs on the slices collection.
        :param database_name: The name of the database.
        :return: The names of the created indexes.
        """
        slices = self._client[database_name][MongoResources.SLICES_COLLECTION]
        index_names = slices.create_indexes(MongoResources.createSliceIndexes())
        logging.info("Created indexes %s on %s.%s", ", ".join(index_names), database_name,
                     MongoResources.SLICES_COLLECTION)
        return index_names
