# -*- coding: utf-8 -*-
"""All-or-nothing scope around document mutations.

    with RoomTransaction(host, "Create Room from JSON", snapshot):
        ...  # commit on normal exit, rollback on any exception
"""

from room_errors import RoomMakerError, TransactionFailure


class RoomTransaction(object):
    def __init__(self, host, name, snapshot=None):
        self.host = host
        self.name = name
        self.snapshot = snapshot
        self.committed = False
        self.rolled_back = False
        self._tx = None

    def _log(self, message):
        if self.snapshot is not None:
            self.snapshot.log(message)

    def __enter__(self):
        try:
            self._tx = self.host.start_transaction(self.name)
        except RoomMakerError:
            raise
        except Exception as ex:
            raise TransactionFailure("Could not start transaction '{}': {}".format(self.name, ex))
        self._log("Transaction '{}' started".format(self.name))
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self._commit()
            return False

        try:
            self._tx.rollback()
            self.rolled_back = True
            self._log("Transaction '{}' rolled back: {}".format(self.name, exc))
        except Exception as rb_ex:
            self._log("Rollback of '{}' failed: {}".format(self.name, rb_ex))
        return False

    def _commit(self):
        try:
            self._tx.commit()
        except TransactionFailure:
            self._discard()
            raise
        except Exception as ex:
            self._discard()
            raise TransactionFailure("Commit of '{}' failed: {}".format(self.name, ex))
        self.committed = True
        self._log("Transaction '{}' committed".format(self.name))

    def _discard(self):
        # A rejected commit may leave the transaction open.
        try:
            self._tx.rollback()
            self.rolled_back = True
        except Exception as rb_ex:
            self._log("Rollback after failed commit of '{}' failed: {}".format(self.name, rb_ex))
