"""Issue-tracking backend clients."""
from ticketbridge.trackers.jira import JiraClient, JiraCredentials


__all__ = ["JiraClient", "JiraCredentials"]
