# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
import os

STRING_TO_BOOL_DICT = {"True", "true", "yes", "1"}


class Settings:
    """
    Class responsible for keeping the application settings.
    """

    # MongoDB connection. The node must be reached directly, it is not part of a replica set yet.
    MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://mongo-primary:27017/?directConnection=true")
    MONGODB_CONNECT_TIMEOUT_MS = int(os.getenv("MONGODB_CONNECT_TIMEOUT_MS", "30000"))

    # Bootstrap targets.
    MONGODB_DATABASE = os.getenv("MONGODB_DATABASE", "resizer")
    MONGODB_COLLECTIONS = ["images", "slices"]
    MONGODB_MIGRATE = os.getenv("MONGODB_MIGRATE") in STRING_TO_BOOL_DICT

    # Optional YAML file with the replica set topology. The default topology is used when empty.
    REPLICA_SET_CONFIG_FILE = os.getenv("REPLICA_SET_CONFIG_FILE")
