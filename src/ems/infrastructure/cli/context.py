"""Per-invocation CLI state: the data store and the acting user."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import click

from ems.application.access import Operation, ensure_permitted
from ems.application.authenticate import AuthenticateHandler
from ems.domain.model.user import User
from ems.infrastructure.bootstrap import data_store
from ems.infrastructure.persistence.data_store import DataStore


@dataclass
class CliContext:
    data_dir: Path | None = None
    username: str | None = None
    password: str | None = None
    _store: DataStore | None = field(default=None, repr=False)

    @property
    def store(self) -> DataStore:
        if self._store is None:
            self._store = data_store(self.data_dir)
        return self._store

    def acting_user(self, operation: Operation) -> User:
        """Authenticate the --user/--password pair and check its role.

        Raises DomainException subclasses; commands turn them into
        ClickException like any other domain error.
        """
        if not self.username:
            raise click.UsageError("This command requires --user and --password")
        user = AuthenticateHandler(self.store.users).handle(self.username, self.password or "")
        ensure_permitted(user, operation)
        return user


pass_cli_context = click.make_pass_decorator(CliContext)
