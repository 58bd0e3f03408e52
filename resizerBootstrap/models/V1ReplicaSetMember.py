# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
from resizerBootstrap.models.BaseModel import BaseModel
from resizerBootstrap.models.fields import BooleanField, IntegerField, StringField


class V1ReplicaSetMember(BaseModel):
    """
    Model for a single entry of the `members` field of the V1ReplicaSetConfig.
    """

    # Unique identifier of the member within the replica set.
    id = IntegerField(required=True, minimum=0)

    # Network address of the member, e.g. `mongo-primary:27017`.
    host = StringField(required=True)

    # Arbiters vote in elections but hold no data. Defaults to False.
    arbiter_only = BooleanField(required=True, default=False)
