# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
from typing import Dict, List, Tuple

from pymongo import ASCENDING, IndexModel

from resizerBootstrap.models.V1ReplicaSetConfig import V1ReplicaSetConfig
from resizerBootstrap.models.V1ReplicaSetMember import V1ReplicaSetMember


class MongoResources:
    """
    Helper class responsible for creating the Mongo commands.
    """

    # Name of the collection holding the image slices, see `createSliceIndexes`.
    SLICES_COLLECTION = "slices"

    @classmethod
    def createReplicaInitiateCommand(cls, replica_set: V1ReplicaSetConfig) -> Tuple[str, dict]:
        """
        Creates a MongoDB command that initiates the replica set, i.e. a rs.initiate() command with the members.
        :param replica_set: The replica set topology.
        :return: The command to be sent to MongoDB.
        """
        replica_set_config = cls._createReplicaConfig(replica_set)
        return "replSetInitiate", replica_set_config

    @classmethod
    def createPingCommand(cls) -> str:
        """
        Returns the command that is used to check whether the MongoDB server accepts connections.
        :return: The command to be sent to MongoDB.
        """
        return "ping"

    @classmethod
    def createSliceIndexes(cls) -> List[IndexModel]:
        """
        Creates the index models for the slices collection. A slice is identified by its image and filename.
        :return: The indexes to be created.
        """
        return [IndexModel([("imageId", ASCENDING), ("filename", ASCENDING)], unique=True)]

    @classmethod
    def _createReplicaConfig(cls, replica_set: V1ReplicaSetConfig) -> Dict[str, any]:
        """
        Creates a dict with the replica set configuration for mongo.
        :param replica_set: The replica set topology.
        :return: A dict with the configuration.
        """
        replica_set.validate()
        return {
            "_id": replica_set.id,
            "version": replica_set.version,
            "members": [cls._createMemberConfig(member) for member in replica_set.members],
        }

    @staticmethod
    def _createMemberConfig(member: V1ReplicaSetMember) -> Dict[str, any]:
        member_config = {"_id": member.id, "host": member.host}
        if member.arbiter_only:
            member_config["arbiterOnly"] = True
        return member_config
