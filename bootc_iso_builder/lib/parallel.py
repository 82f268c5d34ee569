from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..errors import AcquisitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AcquisitionTask:
    name: str
    fn: Callable[[], Any]
    done_message: str
    failure_label: str


def run_all(tasks: Sequence[AcquisitionTask]) -> Dict[str, Any]:
    """Run every task on its own worker and wait for all of them.

    Nothing is cancelled when a task fails. Once all tasks have finished,
    the failure that completed first is raised as an AcquisitionError
    labelled with that task's phase; later failures are only logged.
    """

    results: Dict[str, Any] = {}
    first_failure: Optional[Tuple[AcquisitionTask, BaseException]] = None

    if not tasks:
        return results

    with ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="acquire") as pool:
        futures = {pool.submit(t.fn): t for t in tasks}
        for fut in as_completed(futures):
            task = futures[fut]
            try:
                results[task.name] = fut.result()
            except Exception as e:
                logger.error("%s: %s", task.failure_label, e)
                if first_failure is None:
                    first_failure = (task, e)
                continue
            logger.info("%s", task.done_message)

    if first_failure is not None:
        task, cause = first_failure
        raise AcquisitionError(task.failure_label, cause) from cause
    return results
