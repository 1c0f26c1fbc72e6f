# models/record_store.py

"""
The RecordStore is the central data object of a session and the "source of truth" for all person records.

Records are kept in a single insertion-ordered list, together with the id counter used to number them.
Ids are shared across all roles: the first record created is id 1, the second id 2, and so on, whatever their roles.
Nothing is written to disk; the store lives for one session and is discarded at exit.

Provides functions for creating records with fresh ids, adding and removing them, finding a record by id,
and filtering records by role. Lookups are linear scans over the list.
"""

from __future__ import annotations

import logging

from core.response import ErrorCode, Response
from models.person import Role
from models.types import RECORD_CLASSES, PersonType

logger = logging.getLogger(__name__)


class RecordStore:

    def __init__(self):
        self._records: list[PersonType] = []
        self._next_id: int = 1

    # === properties ===

    @property
    def records(self) -> list[PersonType]:
        return list(self._records)

    @property
    def count(self) -> int:
        return len(self._records)

    # === record factory ===

    def create_record(self, role: Role | str) -> Response:
        """
        Creates a new, untracked record of the given role with the next available id.

        Args:
            role (Role | str): The role of the new record, matched case-insensitively when given as a string.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was created.
                    - False if the role is not recognized or for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_ROLE` if the role is unknown.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The newly created record.
                    - On failure:
                        - None

        Notes:
            - The id counter only advances on success.
            - The record is not tracked until it is passed to `add_record()`.
        """
        resolved_role = Role.from_input(role)

        if resolved_role is None:
            return Response.fail(
                detail=f"Unrecognized role: {role}.",
                error=ErrorCode.INVALID_ROLE,
            )

        try:
            record = RECORD_CLASSES[resolved_role](self._next_id)

        except Exception as e:
            logger.exception("Failed to create %s record", resolved_role.value)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._next_id += 1
            logger.debug("Created %s record with id %d", record.role, record.id)

            return Response.succeed(
                data={
                    "record": record,
                },
            )

    # === data accessors ===

    def get_records(self) -> Response:
        """
        Fetches every record in insertion order.

        Returns:
            Response: On success, `data["records"]` holds the list of records (may be empty).

        Notes:
            - This method is read-only and never raises exceptions.
        """
        return Response.succeed(
            data={
                "records": self.records,
            }
        )

    def get_records_by_role(self, role: Role | str) -> Response:
        """
        Fetches the records whose role matches, preserving insertion order.

        Args:
            role (Role | str): The role to filter by, compared case-insensitively.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the filter ran, even if no records matched.
                    - False for unexpected errors.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[PersonType]): The matching records (may be empty).

        Notes:
            - An unrecognized role simply matches nothing.
        """
        try:
            records = [record for record in self._records if record.is_role(role)]

        except Exception as e:
            logger.exception("Failed to filter records by role %r", role)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "records": records,
                }
            )

    def find_record_by_id(self, id: int) -> Response:
        """
        Finds a record by its numeric id.

        Args:
            id (int): The id assigned when the record was created.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 for unexpected errors
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The matched record.

        Notes:
            - This method is read-only and does not raise.
        """
        try:
            record = next((r for r in self._records if r.id == id), None)

        except Exception as e:
            logger.exception("Failed to look up record with id %r", id)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            if record is None:
                return Response.fail(
                    detail=f"No matching record found for id {id}.",
                    error=ErrorCode.NOT_FOUND,
                    status_code=404,
                )

            return Response.succeed(
                data={
                    "record": record,
                },
            )

    # === data manipulators ===

    def add_record(self, record: PersonType | None) -> Response:
        """
        Appends a record to the end of the store.

        Args:
            record (PersonType): The record to track, normally one returned by `create_record()`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was appended.
                    - False if no record was given or for unexpected errors.
                - detail (str | None):
                    - A confirmation message on success, a description of the error on failure.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if `record` is None.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The added record.
        """
        if record is None:
            return Response.fail(
                detail="No record was provided to add.",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        try:
            self._records.append(record)

        except Exception as e:
            logger.exception("Failed to add record %r", record)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Added %s record with id %d", record.role, record.id)

            return Response.succeed(
                detail="Record successfully added to the store.",
                data={
                    "record": record,
                },
            )

    def remove_record(self, record: PersonType) -> Response:
        """
        Removes the given record object from the store.

        Args:
            record (PersonType): The tracked record to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was removed.
                    - False if the record is not tracked by this store.
                - detail (str | None):
                    - A confirmation message on success, a description of the error on failure.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the record is not in the store.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the record cannot be found
                    - 400 for unexpected errors

        Notes:
            - Matching is by identity, not by field values.
        """
        try:
            index = next(
                (i for i, tracked in enumerate(self._records) if tracked is record),
                None,
            )

            if index is not None:
                del self._records[index]

        except Exception as e:
            logger.exception("Failed to remove record %r", record)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            if index is None:
                return Response.fail(
                    detail=f"No matching record could be found for deletion: {record}.",
                    error=ErrorCode.NOT_FOUND,
                    status_code=404,
                )

            logger.info("Removed %s record with id %d", record.role, record.id)

            return Response.succeed(
                detail="Record successfully removed from the store.",
            )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records, next id {self._next_id})"
