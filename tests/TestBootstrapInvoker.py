# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
from unittest import TestCase
from unittest.mock import patch, call, MagicMock

from pymongo.errors import OperationFailure

from resizerBootstrap.BootstrapInvoker import BootstrapInvoker
from resizerBootstrap.helpers.ReplicaSetLoader import ReplicaSetLoader
from tests.test_utils import getExampleReplicaSetFile, getMongoResponse


@patch("resizerBootstrap.BootstrapInvoker.MongoService")
class TestBootstrapInvoker(TestCase):
    maxDiff = None

    def setUp(self):
        self.replica_set = ReplicaSetLoader.load()

    def test_run(self, service_mock):
        invoker = BootstrapInvoker(url="mongodb://localhost:27017", database_name="resizer", migrate=False,
                                   replica_set_file=None, connect_timeout_ms=1000)
        invoker.run()

        client = service_mock.createClient.return_value
        expected_calls = [
            call.createClient("mongodb://localhost:27017", 1000),
            call(client),
            call().waitForServer(),
            call().initiateReplicaSet(self.replica_set),
            call().ensureCollections("resizer", ["images", "slices"]),
            call.createClient().close(),
        ]
        self.assertEqual(expected_calls, service_mock.mock_calls)

    def test_run_migrate(self, service_mock):
        BootstrapInvoker(database_name="media", migrate=True, replica_set_file=None).run()

        service = service_mock.return_value
        self.assertEqual([
            call.waitForServer(),
            call.initiateReplicaSet(self.replica_set),
            call.ensureCollections("media", ["images", "slices"]),
            call.createSliceIndexes("media"),
        ], service.mock_calls)

    def test_run_custom_collections(self, service_mock):
        BootstrapInvoker(collection_names=["thumbnails"], migrate=False, replica_set_file=None).run()
        service_mock.return_value.ensureCollections.assert_called_once_with("resizer", ["thumbnails"])

    def test_run_replica_set_file(self, service_mock):
        BootstrapInvoker(migrate=False, replica_set_file=getExampleReplicaSetFile("replica-set-5-members")).run()
        replica_set = service_mock.return_value.initiateReplicaSet.call_args[0][0]
        self.assertEqual("resizer-rs", replica_set.id)

    def test_run_already_initialized(self, service_mock):
        details = getMongoResponse("initiate-already-initialized")
        service_mock.return_value.initiateReplicaSet.side_effect = OperationFailure("already initialized", code=23,
                                                                                    details=details)

        with self.assertRaises(OperationFailure) as context:
            BootstrapInvoker(migrate=True, replica_set_file=None).run()

        self.assertEqual(23, context.exception.code)
        service_mock.return_value.initiateReplicaSet.assert_called_once_with(self.replica_set)
        service_mock.return_value.ensureCollections.assert_not_called()
        service_mock.return_value.createSliceIndexes.assert_not_called()
        service_mock.createClient.return_value.close.assert_called_once_with()

    def test_run_server_unreachable(self, service_mock):
        service_mock.return_value.waitForServer.side_effect = TimeoutError("Could not reach MongoDB after 4 retries!")

        with self.assertRaises(TimeoutError):
            BootstrapInvoker(replica_set_file=None).run()

        service_mock.return_value.initiateReplicaSet.assert_not_called()
        service_mock.createClient.return_value.close.assert_called_once_with()

    def test_run_invalid_replica_set_file(self, service_mock):
        with self.assertRaises(FileNotFoundError):
            BootstrapInvoker(replica_set_file=getExampleReplicaSetFile("does-not-exist")).run()
        service_mock.createClient.assert_not_called()


class TestBootstrapInvokerWithClient(TestCase):
    """ Runs the whole sequence against a mocked client, checking the exact documents sent to MongoDB. """
    maxDiff = None

    @patch("resizerBootstrap.services.MongoService.MongoClient")
    def test_run(self, mongo_client_mock):
        client = mongo_client_mock.return_value
        client.admin.command.side_effect = getMongoResponse("ping-ok"), getMongoResponse("initiate-ok")
        manager = MagicMock()
        manager.attach_mock(client.admin.command, "command")
        manager.attach_mock(client.__getitem__.return_value.create_collection, "create_collection")

        BootstrapInvoker(url="mongodb://mongo-primary:27017/?directConnection=true", database_name="resizer",
                         migrate=False, replica_set_file=None).run()

        expected_calls = [
            call.command("ping"),
            call.command("replSetInitiate", {
                "_id": "rs0",
                "version": 1,
                "members": [
                    {"_id": 0, "host": "mongo-primary:27017"},
                    {"_id": 1, "host": "mongo-secondary:27018"},
                    {"_id": 2, "host": "mongo-arbiter:27019", "arbiterOnly": True}
                ]
            }),
            call.create_collection("images", check_exists=False),
            call.create_collection("slices", check_exists=False),
        ]
        self.assertEqual(expected_calls, manager.mock_calls)
        client.close.assert_called_once_with()
