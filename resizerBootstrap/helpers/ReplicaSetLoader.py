# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
import logging
from typing import Optional

import yaml

from resizerBootstrap.models.V1ReplicaSetConfig import V1ReplicaSetConfig


class ReplicaSetLoader:
    """
    Helper class responsible for providing the replica set topology that should be initiated.
    """

    DEFAULT_REPLICA_SET = {
        "id": "rs0",
        "version": 1,
        "members": [
            {"id": 0, "host": "mongo-primary:27017"},
            {"id": 1, "host": "mongo-secondary:27018"},
            {"id": 2, "host": "mongo-arbiter:27019", "arbiterOnly": True},
        ]
    }

    @classmethod
    def load(cls, file_name: Optional[str] = None) -> V1ReplicaSetConfig:
        """
        Loads the replica set topology.
        :param file_name: Optional path to a YAML file with the topology. The default topology is used if not given.
        :return: The validated replica set configuration.
        :raise ValueError: If the topology is not valid.
        """
        if not file_name:
            logging.debug("Using the default replica set topology.")
            return cls.fromDict(cls.DEFAULT_REPLICA_SET)

        logging.info("Loading replica set topology from %s", file_name)
        with open(file_name) as f:
            return cls.fromDict(yaml.safe_load(f))

    @staticmethod
    def fromDict(values: dict) -> V1ReplicaSetConfig:
        """
        Creates the replica set configuration model.
        :param values: The raw topology, with either pascal cased or underscored keys.
        :return: The validated replica set configuration.
        :raise ValueError: If the topology is not valid.
        """
        if not isinstance(values, dict):
            raise ValueError("The replica set topology must be a mapping (got {}).".format(repr(values)))
        try:
            replica_set = V1ReplicaSetConfig(**values)
        except TypeError as err:
            raise ValueError("Invalid values passed to V1ReplicaSetConfig: {}. Received {}.".format(err, values))
        replica_set.validate()
        return replica_set
