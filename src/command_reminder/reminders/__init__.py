"""Reminder store engine.

Layout of the store file (one record per pair of lines):

    # list files
    ls -la
    # git undo last commit
    git reset --soft HEAD~1

Even lines are keyword lines (marker + space separated keywords), odd lines
are the commands they describe.
"""

from command_reminder.reminders.store import ReminderStore

__all__ = ["ReminderStore"]
