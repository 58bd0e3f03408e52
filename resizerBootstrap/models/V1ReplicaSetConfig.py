# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
from collections import Counter

from resizerBootstrap.models.BaseModel import BaseModel
from resizerBootstrap.models.V1ReplicaSetMember import V1ReplicaSetMember
from resizerBootstrap.models.fields import EmbeddedListField, IntegerField, StringField


class V1ReplicaSetConfig(BaseModel):
    """
    Model that contains the replica set topology. See `examples/replica-set.yaml` for an example.
    """

    id = StringField(required=True)

    # Starts at 1, any reconfiguration of the set must increment it.
    version = IntegerField(required=True, minimum=1, default=1)

    members = EmbeddedListField(V1ReplicaSetMember, required=True)

    def validate(self) -> None:
        super().validate()
        for member in self.members:
            member.validate()
        duplicates = sorted(member_id for member_id, count in Counter(m.id for m in self.members).items()
                            if count > 1)
        if duplicates:
            raise ValueError("Error for field 'members': duplicate member ids {}.".format(duplicates))
