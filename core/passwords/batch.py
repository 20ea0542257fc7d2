"""
Batch password generation.

Validates a request, then runs one generate + hash cycle per requested
password. Cycles share nothing but the random source, so they may run on a
bounded thread pool; bcrypt releases the GIL while hashing. Output order
always matches request order, and a batch either completes in full or
raises.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from typing import Any, Dict, List, Optional

from core.config.settings import GenerationLimits
from core.models.generation import (
    BatchResult,
    GeneratedPassword,
    GenerationOptions,
    GenerationRequest,
)
from core.passwords.errors import PartialBatchError, InvalidRequestError
from core.passwords.generator import RandomSource, generate_password
from core.passwords.hasher import hash_password

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NOTICE = "No character classes selected; defaulted to lowercase letters"


def validate_request(request: GenerationRequest, limits: Optional[GenerationLimits] = None) -> None:
    """
    Check every numeric field against its inclusive range.

    Raises:
        InvalidRequestError: Listing every offending field. Values are
            rejected, never clamped.
    """
    limits = limits or GenerationLimits()
    values = {
        "count": request.count,
        "length": request.length,
        "costFactor": request.cost_factor,
    }

    errors: List[Dict[str, Any]] = []
    for name, (low, high) in limits.ranges().items():
        value = values[name]
        # bool is an int subclass but never a valid count
        if not isinstance(value, int) or isinstance(value, bool):
            errors.append({"field": name, "value": value, "message": "must be an integer"})
        elif not low <= value <= high:
            errors.append({
                "field": name,
                "value": value,
                "message": f"must be between {low} and {high}",
            })

    if errors:
        raise InvalidRequestError(errors)


class PasswordBatchGenerator:
    """
    Batch orchestrator.

    Args:
        limits: Accepted ranges for count, length and cost factor
        max_workers: Thread pool size; 1 runs cycles sequentially
        rng: Random source shared by every cycle (default: system CSPRNG).
            A seeded source only gives reproducible output when sequential.
    """

    def __init__(
        self,
        limits: Optional[GenerationLimits] = None,
        max_workers: int = 1,
        rng: Optional[RandomSource] = None,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.limits = limits or GenerationLimits()
        self.max_workers = max_workers
        self.rng = rng

    def generate_batch(self, request: GenerationRequest) -> BatchResult:
        """
        Generate and hash `request.count` passwords.

        Returns:
            BatchResult with passwords in request order and any notices

        Raises:
            InvalidRequestError: A field is out of range
            PartialBatchError: A cycle failed; no passwords are returned
        """
        validate_request(request, self.limits)

        notices: List[str] = []
        options = request.options
        if not options.enabled_classes:
            options = replace(options, lowercase=True)
            notices.append(DEFAULT_CLASS_NOTICE)
            logger.warning("[BATCH] No character classes enabled, substituting lowercase")

        logger.info(
            f"[BATCH] Generating {request.count} passwords "
            f"(length={request.length}, cost={request.cost_factor}, "
            f"workers={min(self.max_workers, request.count)})"
        )
        start = time.time()

        if self.max_workers > 1 and request.count > 1:
            passwords = self._run_parallel(request, options)
        else:
            passwords = self._run_sequential(request, options)

        logger.info(f"[BATCH] Generated {len(passwords)} passwords in {time.time() - start:.2f}s")
        return BatchResult(passwords=passwords, notices=notices)

    def _run_cycle(self, index: int, request: GenerationRequest, options: GenerationOptions) -> GeneratedPassword:
        password = generate_password(
            request.length,
            options.enabled_classes,
            easy_to_read=options.easy_to_read,
            rng=self.rng,
        )
        hashed = hash_password(password, request.cost_factor)
        logger.debug(f"[BATCH] Cycle {index + 1}/{request.count} complete")
        return GeneratedPassword(password=password, hash=hashed)

    def _run_sequential(self, request: GenerationRequest, options: GenerationOptions) -> List[GeneratedPassword]:
        passwords: List[GeneratedPassword] = []
        for index in range(request.count):
            try:
                passwords.append(self._run_cycle(index, request, options))
            except Exception as e:
                logger.error(f"[BATCH] Cycle {index + 1}/{request.count} failed: {e}")
                raise PartialBatchError(index, request.count, e) from e
        return passwords

    def _run_parallel(self, request: GenerationRequest, options: GenerationOptions) -> List[GeneratedPassword]:
        results: List[Optional[GeneratedPassword]] = [None] * request.count
        workers = min(self.max_workers, request.count)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pwgen") as executor:
            futures = {
                executor.submit(self._run_cycle, index, request, options): index
                for index in range(request.count)
            }
            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                except Exception as e:
                    executor.shutdown(wait=False, cancel_futures=True)
                    logger.error(f"[BATCH] Cycle {index + 1}/{request.count} failed: {e}")
                    raise PartialBatchError(index, request.count, e) from e

        return results


def generate_batch(
    request: GenerationRequest,
    limits: Optional[GenerationLimits] = None,
    max_workers: int = 1,
) -> BatchResult:
    """Generate a batch with a one-off orchestrator."""
    return PasswordBatchGenerator(limits=limits, max_workers=max_workers).generate_batch(request)
