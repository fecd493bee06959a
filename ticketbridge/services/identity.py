"""Reporter identity resolution."""

from typing import Any

from loguru import logger

from ticketbridge.core.exceptions import BackendError, UserResolutionError
from ticketbridge.trackers.jira import JiraClient


def _account_id(account: dict[str, Any]) -> str:
    account_id = account["accountId"]
    if not isinstance(account_id, str) or not account_id:
        raise ValueError(f"Invalid accountId: {account_id!r}")
    return account_id


async def resolve_reporter(client: JiraClient, email: str, username: str) -> str:
    """Return the Jira account id for a reporter, creating the account if needed.

    The first matching account wins. When none matches, a new account is
    created for the email; that account is not removed if ticket creation
    fails later.

    Args:
        client: Jira client.
        email: Reporter email address.
        username: Reporter display name, used for logging only.

    Returns:
        The reporter's accountId.

    Raises:
        UserResolutionError: If the lookup or the account creation fails.
    """
    try:
        matches = await client.search_users(email)
        if matches:
            return _account_id(matches[0])

        created = await client.create_user(email)
        account_id = _account_id(created)
    except (BackendError, KeyError, TypeError, IndexError, ValueError) as e:
        logger.error("Error getting/creating user in Jira", email=email, error=str(e))
        raise UserResolutionError(email) from e

    logger.info("Created Jira user", email=email, username=username, account_id=account_id)
    return account_id
