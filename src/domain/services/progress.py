"""Learner progress service.

Multi-step flows over several repositories:
  - mark a lesson done for the acting user
  - check an answer and record the attempt
  - issue a share token for the acting user's progress
  - resolve a share token into a progress summary

None of these flows is atomic.  Each repository call commits on its own, so
a failure after the first write leaves the earlier writes in place.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
from datetime import datetime, timedelta, timezone
from uuid import UUID

from src.domain.errors import InvalidAnswer, ResourceNotFound, TokenExpired
from src.domain.models.courses import Lesson
from src.domain.models.enums import ProgressStatus, ResourceType, TaskType
from src.domain.models.identity import Actor
from src.domain.models.progress import (
    ProgressSummary,
    ProgressToken,
    ProgressTokenCreate,
    TaskCheckResult,
    UserProgress,
    UserProgressCreate,
    UserTaskAttemptCreate,
)
from src.domain.repositories.access import check_access
from src.domain.repositories.answers import AnswerRepository
from src.domain.repositories.attempts import UserTaskAttemptRepository
from src.domain.repositories.lessons import LessonRepository
from src.domain.repositories.progress import UserProgressRepository
from src.domain.repositories.tasks import TaskRepository
from src.domain.repositories.tokens import ProgressTokenRepository
from src.domain.repositories.users import UserRepository

logger = logging.getLogger(__name__)

# 32 random bytes, URL-safe base64 encoded.
_TOKEN_BYTES = 32


def generate_token() -> str:
    return secrets.token_urlsafe(_TOKEN_BYTES)


class ProgressService:
    def __init__(
        self,
        users: UserRepository,
        lessons: LessonRepository,
        tasks: TaskRepository,
        answers: AnswerRepository,
        progress: UserProgressRepository,
        attempts: UserTaskAttemptRepository,
        tokens: ProgressTokenRepository,
        token_ttl: timedelta = timedelta(minutes=30),
    ) -> None:
        self._users = users
        self._lessons = lessons
        self._tasks = tasks
        self._answers = answers
        self._progress = progress
        self._attempts = attempts
        self._tokens = tokens
        self._token_ttl = token_ttl

    async def _require_lesson(self, actor: Actor, lesson_id: UUID) -> Lesson:
        lesson = await self._lessons.find_by_id(actor, lesson_id)
        if lesson is None:
            raise ResourceNotFound(ResourceType.LESSON)
        return lesson

    async def mark_lesson_done(self, actor: Actor, lesson_id: UUID) -> UserProgress:
        """Record that the actor completed the lesson.

        An existing progress record for the lesson is replaced rather than
        duplicated.
        """
        await self._require_lesson(actor, lesson_id)
        payload = UserProgressCreate(
            user_id=actor.user_id,
            lesson_id=lesson_id,
            status=ProgressStatus.DONE,
        )
        existing = await self._progress.find_for_lesson(actor, actor.user_id, lesson_id)
        if existing is None:
            return await self._progress.create(actor, payload)
        await check_access(self._progress, actor, existing, actor.user_id)
        return await self._progress.update(existing, actor, payload)

    async def check_answer(
        self,
        actor: Actor,
        answer_id: UUID,
        user_answer: str | None = None,
    ) -> TaskCheckResult:
        """Grade an answer against its task and record the attempt.

        string_cmp tasks compare the lower-cased, trimmed user_answer with the
        stored answer text; every other task type uses the answer's
        is_correct flag.
        """
        answer = await self._answers.find_by_id(actor, answer_id)
        if answer is None:
            raise ResourceNotFound(ResourceType.ANSWER)
        task = await self._tasks.find_by_id(actor, answer.task_id)
        if task is None:
            raise ResourceNotFound(ResourceType.TASK)

        if task.task_type == TaskType.STRING_CMP:
            if user_answer is None:
                raise InvalidAnswer("user_answer is required for string_cmp tasks")
            is_correct = answer.answer_text == user_answer.lower().strip()
        else:
            is_correct = answer.is_correct

        await self._attempts.create(
            actor,
            UserTaskAttemptCreate(
                user_id=actor.user_id,
                task_id=task.id,
                selected_answer_id=answer.id,
                is_correct=is_correct,
            ),
        )
        return TaskCheckResult(
            is_correct=is_correct,
            explanation=task.explanation,
            image=answer.image,
        )

    async def share_progress(self, actor: Actor) -> ProgressToken:
        """Issue a short-lived token exposing the actor's progress summary."""
        expires_at = datetime.now(timezone.utc) + self._token_ttl
        return await self._tokens.create(
            actor,
            ProgressTokenCreate(token=generate_token(), user_id=actor.user_id, expires_at=expires_at),
        )

    async def progress_by_token(self, token: str) -> ProgressSummary:
        """Resolve a share token into the owner's progress summary.

        Runs as the system actor: anyone holding a valid token may read the
        summary.  Expired tokens are purged first; a token that expires
        between the purge and the lookup is deleted and rejected.
        """
        system = Actor.admin()

        await self._tokens.cleanup_expired(system)

        found = await self._tokens.find_by_token(system, token)
        if found is None:
            raise ResourceNotFound(ResourceType.PROGRESS_TOKEN)
        if found.is_expired():
            await self._tokens.delete(found, system)
            raise TokenExpired()

        user = await self._users.find_by_id(system, found.user_id)
        if user is None:
            raise ResourceNotFound(ResourceType.USER)
        owner = Actor(user_id=user.id, role=user.role)

        # Independent reads; no ordering between them.
        total_lessons, completed_lessons, total_answers, correct_answers = await asyncio.gather(
            self._lessons.count(owner),
            self._progress.count_completed(owner),
            self._attempts.count(owner),
            self._attempts.count_correct(owner),
        )
        return ProgressSummary(
            username=user.username,
            total_lessons=total_lessons,
            completed_lessons=completed_lessons,
            total_answers=total_answers,
            correct_answers=correct_answers,
        )
