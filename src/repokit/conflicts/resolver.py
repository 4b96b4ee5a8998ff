"""Interactive conflict resolution.

One ConflictResolver handles one site. The flow is a small state
machine::

    CHECKING -> CLEAR                      (name is free)
    CHECKING -> CONFLICT
    CONFLICT -> RESOLVED                   (option 1 confirmed, or option 2)
    CONFLICT -> CONFLICT                   (invalid input, deletion cancelled)
    CONFLICT -> ABORTED                    (option 3)

Invalid menu input is not counted; the operator can retry forever.
"""

from __future__ import annotations

import logging

from repokit.conflicts.prompts import Prompter
from repokit.conflicts.sites import ConflictSite
from repokit.models.project import ConflictChoice, ProjectTarget, ResolutionState

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter your choice (1-3): "
RENAME_PROMPT = "Enter a new project name: "
INVALID_CHOICE_MESSAGE = "Invalid option. Please choose 1, 2, or 3."


class ConflictResolver:
    """Drive the three-option menu for one conflict site."""

    def __init__(self, site: ConflictSite, prompter: Prompter) -> None:
        self.site = site
        self.prompter = prompter
        self.state = ResolutionState.CHECKING

    def resolve(self, target: ProjectTarget) -> ResolutionState:
        """Run until the name is free or the operator aborts.

        A rename mutates ``target`` in place.

        Returns:
            CLEAR, RESOLVED, or ABORTED.
        """
        self.state = ResolutionState.CHECKING
        if not self.site.exists(target):
            self.state = ResolutionState.CLEAR
            return self.state

        self.state = ResolutionState.CONFLICT
        logger.debug("%s: conflict on '%s'", type(self.site).__name__, target.name)
        while self.state is ResolutionState.CONFLICT:
            self._show_menu(target)
            choice = ConflictChoice.parse(self.prompter.ask(CHOICE_PROMPT))
            if choice is None:
                self.prompter.say(INVALID_CHOICE_MESSAGE)
                continue
            self.state = self._apply(choice, target)
        return self.state

    def _show_menu(self, target: ProjectTarget) -> None:
        self.prompter.say(self.site.conflict_message(target))
        self.prompter.say("Choose an option:")
        for number, label in enumerate(self.site.options, 1):
            self.prompter.say(f"{number}. {label}")

    def _apply(self, choice: ConflictChoice, target: ProjectTarget) -> ResolutionState:
        if choice is ConflictChoice.DESTROY:
            if self.site.destroy(target, self.prompter):
                return ResolutionState.RESOLVED
            return ResolutionState.CONFLICT
        if choice is ConflictChoice.RENAME:
            self._rename(target)
            return ResolutionState.RESOLVED
        return ResolutionState.ABORTED

    def _rename(self, target: ProjectTarget) -> None:
        # Replacement names skip PROJECT_NAME_PATTERN validation.
        while True:
            new_name = self.prompter.ask(RENAME_PROMPT).strip()
            if not new_name:
                continue
            target.rename(new_name)
            if not self.site.exists(target):
                logger.debug("renamed project to '%s'", new_name)
                return
            self.prompter.say(self.site.name_taken_message)
