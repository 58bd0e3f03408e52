# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
import logging
from typing import List, Optional

from Settings import Settings
from resizerBootstrap.helpers.ReplicaSetLoader import ReplicaSetLoader
from resizerBootstrap.services.MongoService import MongoService


class BootstrapInvoker:
    """
    Prepares the resizer MongoDB deployment: initiates the replica set and creates the collections.
    Meant to be executed once, when the deployment is created.
    """

    def __init__(self, url: str = Settings.MONGODB_URL, database_name: str = Settings.MONGODB_DATABASE,
                 collection_names: Optional[List[str]] = None, migrate: bool = Settings.MONGODB_MIGRATE,
                 replica_set_file: Optional[str] = Settings.REPLICA_SET_CONFIG_FILE,
                 connect_timeout_ms: int = Settings.MONGODB_CONNECT_TIMEOUT_MS) -> None:
        """
        :param url: The connection string of the node that should become the primary.
        :param database_name: The database in which the collections are created.
        :param collection_names: The collections to create, in order. Defaults to the resizer collections.
        :param migrate: Whether the registry indexes should be created as well.
        :param replica_set_file: Optional YAML file with the replica set topology.
        :param connect_timeout_ms: The connection timeout, in milliseconds.
        """
        self._url = url
        self._database_name = database_name
        self._collection_names = collection_names or list(Settings.MONGODB_COLLECTIONS)
        self._migrate = migrate
        self._replica_set_file = replica_set_file
        self._connect_timeout_ms = connect_timeout_ms

    def run(self) -> None:
        """
        Runs the bootstrap sequence. Any failure is raised to the caller.
        """
        replica_set = ReplicaSetLoader.load(self._replica_set_file)
        client = MongoService.createClient(self._url, self._connect_timeout_ms)
        try:
            service = MongoService(client)
            service.waitForServer()
            service.initiateReplicaSet(replica_set)
            service.ensureCollections(self._database_name, self._collection_names)
            if self._migrate:
                service.createSliceIndexes(self._database_name)
        finally:
            client.close()
        logging.info("Bootstrapped replica set %s and database %s", replica_set.id, self._database_name)
