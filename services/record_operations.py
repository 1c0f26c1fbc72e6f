# services/record_operations.py

"""
The five record workflows: Add, View All, View By Role, Edit, and Delete.

Each workflow is a single synchronous pass over a `RecordStore`. Workflows that
need input take a `read_line` provider, which is called with the prompt text and
returns the next line (or None once input runs out), so they can be driven from
the terminal or from a list of scripted answers.

Every workflow returns a `Response`: `detail` carries the outcome message, and
`data["listing"]` carries any rendered record lines. Malformed input is always
absorbed into a failed `Response`; no workflow raises.
"""

from __future__ import annotations

import logging

import core.formatters as formatters
from core.config import CONFIRM_NO, CONFIRM_YES, ROLE_MENU
from core.response import ErrorCode, Response
from core.utils import InputProvider, try_parse_int
from models.person import Role, list_roles
from models.record_store import RecordStore
from models.types import PersonType

logger = logging.getLogger(__name__)


# === rendering helpers ===


def render_records(records: list[PersonType]) -> list[str]:
    """
    Renders records as table lines, header first, each record followed by a blank line.
    """
    lines = formatters.format_table_header()

    for record in records:
        lines.extend(record.display().splitlines())
        lines.append("")

    return lines


def format_role_menu() -> str:
    choices = "\n".join(f"{number}. {role}" for number, role in ROLE_MENU.items())
    return f"Select User Group:\n{choices}\nYour Choice: "


def internal_error(action: str, e: Exception) -> Response:
    logger.exception("Unexpected error during %s", action)
    return Response.fail(
        detail=f"Unexpected error: {e}",
        error=ErrorCode.INTERNAL_ERROR,
    )


# === add ===


def add_record(store: RecordStore, read_line: InputProvider) -> Response:
    """
    Creates a record of the selected role, collects its fields, and adds it to the store.

    Args:
        store (RecordStore): The session's record store.
        read_line (InputProvider): Supplies the role choice, then one response per field prompt.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the record was created and added.
                - False if the role choice is invalid or for unexpected errors.
            - detail (str | None):
                - On success, the confirmation message with the assigned id.
                - On failure, a human-readable description of the problem.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_ROLE` if the choice is not one of the role menu numbers.
                - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "record" (PersonType): The new record.

    Notes:
        - An invalid role choice leaves the store and its id counter untouched.
        - Field prompts run in declared order: name, telephone, email, then the role's own fields.
    """
    choice = read_line(format_role_menu())
    role = ROLE_MENU.get((choice or "").strip())

    if role is None:
        logger.info("Rejected role choice %r", choice)
        return Response.fail(
            detail="Invalid role selected. Allowed options are 1 - Teacher, 2 - Admin, or 3 - Student.",
            error=ErrorCode.INVALID_ROLE,
        )

    try:
        create_response = store.create_record(role)

        if not create_response.success:
            return create_response

        record = create_response.data["record"]
        record.populate_fields(read_line)

        add_response = store.add_record(record)

        if not add_response.success:
            return add_response

    except Exception as e:
        return internal_error("add", e)

    else:
        return Response.succeed(
            detail=f"Record added successfully! Assigned ID: {record.id}",
            data={
                "record": record,
            },
        )


# === view ===


def view_all_records(store: RecordStore) -> Response:
    """
    Renders every record in insertion order beneath the table header.

    Returns:
        Response: On success, `data["listing"]` holds the rendered lines and `data["records"]` the records.
        Fails with `ErrorCode.NO_RECORDS` when the store is empty.

        Fails with `ErrorCode.INTERNAL_ERROR` if a record cannot be rendered.

    Notes:
        - This workflow is read-only.
    """
    if store.count == 0:
        return Response.fail(
            detail="No records found.",
            error=ErrorCode.NO_RECORDS,
            status_code=404,
        )

    try:
        records = store.get_records().data["records"]
        listing = ["All Records:", *render_records(records)]

    except Exception as e:
        return internal_error("view all", e)

    else:
        return Response.succeed(
            detail=f"{len(records)} record(s) found.",
            data={
                "records": records,
                "listing": listing,
            },
        )


def view_records_by_role(store: RecordStore, read_line: InputProvider) -> Response:
    """
    Prompts for a role and renders the matching records in insertion order.

    Args:
        store (RecordStore): The session's record store.
        read_line (InputProvider): Supplies the role to filter by.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if at least one record matched.
                - False if the role is invalid or nothing matched.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_ROLE` if the role is not Teacher, Admin, or Student.
                - `ErrorCode.NO_RECORDS` if no record has that role.
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "records" (list[PersonType]): The matching records.
                    - "listing" (list[str]): The rendered lines.

    Notes:
        - The role is matched case-insensitively and is echoed back as typed.
    """
    role_input = read_line(f"Enter role to filter ({'/'.join(list_roles())}): ")
    role = (role_input or "").strip()

    if Role.from_input(role) is None:
        logger.info("Rejected role filter %r", role_input)
        return Response.fail(
            detail="Invalid role entered! Please type Teacher, Admin, or Student only.",
            error=ErrorCode.INVALID_ROLE,
        )

    filter_response = store.get_records_by_role(role)

    if not filter_response.success:
        return filter_response

    records = filter_response.data["records"]

    if not records:
        return Response.fail(
            detail=f"No records found for role: {role}",
            error=ErrorCode.NO_RECORDS,
            status_code=404,
        )

    return Response.succeed(
        detail=f"{len(records)} record(s) found for role: {role}",
        data={
            "records": records,
            "listing": [f"Records for {role}:", *render_records(records)],
        },
    )


# === edit ===


def edit_record(store: RecordStore, read_line: InputProvider) -> Response:
    """
    Prompts for a record id and runs that record's field editor.

    Args:
        store (RecordStore): The session's record store.
        read_line (InputProvider): Supplies the id, then one response per editable field.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the record was found and edited.
                - False otherwise.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_ID` if the id is not an integer.
                - `ErrorCode.NOT_FOUND` if no record has that id.
                - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "record" (PersonType): The edited record.

    Notes:
        - Blank responses keep the current value of each field.
    """
    record_id = try_parse_int(read_line("Enter record ID to edit: "))

    if record_id is None:
        return Response.fail(
            detail="Invalid ID.",
            error=ErrorCode.INVALID_ID,
        )

    find_response = store.find_record_by_id(record_id)

    if not find_response.success:
        return Response.fail(
            detail="Record not found.",
            error=find_response.error,
            status_code=find_response.status_code,
        )

    record = find_response.data["record"]

    try:
        record.edit_fields(read_line)

    except Exception as e:
        return internal_error("edit", e)

    else:
        logger.info("Edited %s record with id %d", record.role, record.id)

        return Response.succeed(
            detail="Record updated successfully.",
            data={
                "record": record,
            },
        )


# === delete ===


def delete_record(store: RecordStore, read_line: InputProvider) -> Response:
    """
    Prompts for a record id, shows the record, and removes it only on explicit confirmation.

    Args:
        store (RecordStore): The session's record store.
        read_line (InputProvider): Supplies the id, then the confirmation answer.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the record was removed.
                - False otherwise, in which case the store is unchanged.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_ID` if the id is not an integer.
                - `ErrorCode.NOT_FOUND` if no record has that id.
                - `ErrorCode.CANCELLED` if the answer was "2" (No).
                - `ErrorCode.INVALID_CHOICE` for any other answer.
                - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
            - data (dict | None): Payload with the following keys:
                - Once the record is found:
                    - "record" (PersonType): The targeted record.

    Notes:
        - The rendered record is included in the confirmation prompt.
        - Only the answer "1" (Yes) removes the record.
    """
    record_id = try_parse_int(read_line("Enter record ID to delete: "))

    if record_id is None:
        return Response.fail(
            detail="Invalid ID entered. Returning to main menu...",
            error=ErrorCode.INVALID_ID,
        )

    find_response = store.find_record_by_id(record_id)

    if not find_response.success:
        return Response.fail(
            detail=f"Record with ID {record_id} not found.",
            error=find_response.error,
            status_code=find_response.status_code,
        )

    record = find_response.data["record"]

    try:
        choice = read_line(
            f"Record found:\n{record.display()}\n\n"
            f"Are you sure you want to delete this record? "
            f"({CONFIRM_YES}. Yes, {CONFIRM_NO}. No): "
        )
        choice = (choice or "").strip()

        if choice == CONFIRM_YES:
            remove_response = store.remove_record(record)

    except Exception as e:
        return internal_error("delete", e)

    if choice == CONFIRM_YES:
        if not remove_response.success:
            return remove_response

        return Response.succeed(
            detail="Record deleted successfully.",
            data={
                "record": record,
            },
        )

    if choice == CONFIRM_NO:
        return Response.fail(
            detail="Operation cancelled. Record not deleted.",
            error=ErrorCode.CANCELLED,
            data={
                "record": record,
            },
        )

    logger.info("Rejected delete confirmation %r", choice)
    return Response.fail(
        detail="Invalid choice. Operation aborted.",
        error=ErrorCode.INVALID_CHOICE,
        data={
            "record": record,
        },
    )
