"""
Selection of the message(s) a merge request pipeline has to lint.

When squash-on-merge is active and the pipeline is not part of a merge
train, the resulting commit message is derived from the merge request
title, so the title is the only thing that has to follow the convention.
In every other case each commit lands on the target branch as-is and has
to be checked on its own.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from mrlint.errors import InvalidContextError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeContext:
	"""Everything the policy needs to know about one merge request pipeline."""

	is_squash_enabled: bool
	is_merge_train_event: bool
	mr_title: str
	commit_messages: Sequence[str] = field(default_factory=tuple)

	def __post_init__(self) -> None:
		"""Normalize the commit messages to a tuple so contexts stay hashable."""
		object.__setattr__(self, "commit_messages", tuple(self.commit_messages))


@dataclass(frozen=True)
class TitleTarget:
	"""Only the merge request title has to be validated."""

	title: str

	@property
	def messages(self) -> tuple[str, ...]:
		return (self.title,)


@dataclass(frozen=True)
class CommitSetTarget:
	"""Every commit message of the merge request has to be validated, oldest first."""

	messages: tuple[str, ...]


ValidationTarget = TitleTarget | CommitSetTarget


def select_validation_target(ctx: MergeContext) -> ValidationTarget:
	"""
	Decide which message(s) must satisfy the commit convention.

	Args:
	    ctx: The merge request context loaded for this pipeline

	Returns:
	    TitleTarget when squash is enabled outside of a merge train,
	    CommitSetTarget otherwise.

	Raises:
	    InvalidContextError: If squash is enabled without a title, or the
	        commit set to validate is empty.

	"""
	if ctx.is_squash_enabled and not ctx.mr_title.strip():
		msg = "Squash on merge is enabled but the merge request title is empty"
		raise InvalidContextError(msg)

	if ctx.is_squash_enabled and not ctx.is_merge_train_event:
		logger.info("The MR is set to squash, linting the MR title")
		return TitleTarget(ctx.mr_title)

	if not ctx.commit_messages:
		msg = "No commit messages were found for the merge request"
		raise InvalidContextError(msg)

	logger.info("Linting all %d commit(s) of the MR", len(ctx.commit_messages))
	return CommitSetTarget(tuple(ctx.commit_messages))
