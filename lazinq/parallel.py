from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed, wait
from dataclasses import replace
from itertools import chain
from .types import *
from .config import ParallelOptions
from .enumerable import Enumerable

logger = logging.getLogger(__name__)

# a stage turns one partition's element stream into its output stream
Stage = Callable[[Iterable[Any]], Iterable[Any]]


class _Cancelled(Exception):
    """raised inside a worker that noticed the shared signal and stopped early"""
    pass


class _FailureSignal:
    """shared stop flag plus the first error any worker raised"""

    def __init__(self):
        self._lock = threading.Lock()
        self._event = threading.Event()
        self.error: Optional[BaseException] = None

    @property
    def is_set(self) -> bool:
        return self._event.is_set()

    def fail(self, error: BaseException):
        with self._lock:
            if self.error is None:
                self.error = error
        self._event.set()

    def cancel(self):
        self._event.set()


def split_every(size: int, items: List[T]) -> List[List[T]]:
    """split a buffered sequence into consecutive partitions of at most size elements"""
    return [items[i:i + size] for i in range(0, len(items), size)]


class ParallelEnumerable(Enumerable[T]):
    """
    a query whose where/select/select_many stages run per partition on a thread pool.

    the source is buffered, split into partitions and every partition runs the whole
    stage chain on one worker. unordered results are merged as partitions complete;
    ordered results are re-assembled in partition order. any other operator called on
    this sequence runs sequentially over the merged output.

    the first error raised by a worker stops the remaining partitions and is re-raised
    unmodified once the pool has shut down; a failed query never returns a partial result
    from a terminal operator.

    iterating directly in unordered mode can hand out elements of partitions that finished
    before the failing one; collect through a terminal operator (to.list(), to.count(), ...)
    for all-or-nothing results.
    """

    def __init__(self, source: Iterable[Any], options: ParallelOptions, stages: Tuple[Stage, ...] = ()):
        self._source = source
        self._options = options
        self._stages = tuple(stages)
        super().__init__(self._execute)

    @property
    def options(self) -> ParallelOptions:
        return self._options

    def _derive(self, options: Optional[ParallelOptions] = None,
                stage: Optional[Stage] = None) -> 'ParallelEnumerable[Any]':
        stages = self._stages + (stage,) if stage is not None else self._stages
        return ParallelEnumerable(self._source, options or self._options, stages)

    # --- configuration ---

    def with_degree_of_parallelism(self, degree: int) -> 'ParallelEnumerable[T]':
        return self._derive(options=replace(self._options, degree=degree))

    def with_partition_size(self, partition_size: int) -> 'ParallelEnumerable[T]':
        return self._derive(options=replace(self._options, partition_size=partition_size))

    def as_ordered(self) -> 'ParallelEnumerable[T]':
        """merge results back in source order (costs buffering of finished partitions)"""
        return self._derive(options=replace(self._options, ordered=True))

    def as_unordered(self) -> 'ParallelEnumerable[T]':
        """merge results in completion order"""
        return self._derive(options=replace(self._options, ordered=False))

    def as_sequential(self) -> 'Enumerable[T]':
        """a plain sequence over the merged output; later operators run on the calling thread"""
        return Enumerable(self.__iter__)

    # --- per-partition stages ---

    def where(self, predicate: Predicate[T]) -> 'ParallelEnumerable[T]':
        return self._derive(stage=lambda items: (item for item in items if predicate(item)))

    def select(self, selector: Selector[T, U]) -> 'ParallelEnumerable[U]':
        return self._derive(stage=lambda items: map(selector, items))

    def select_many(self, selector: Selector[T, Iterable[U]]) -> 'ParallelEnumerable[U]':
        return self._derive(stage=lambda items: chain.from_iterable(map(selector, items)))

    # --- execution ---

    @staticmethod
    def _guarded(partition: List[Any], signal: _FailureSignal) -> Iterator[Any]:
        for item in partition:
            if signal.is_set:
                raise _Cancelled()
            yield item

    def _run_partition(self, partition: List[Any], signal: _FailureSignal) -> List[Any]:
        items: Iterable[Any] = self._guarded(partition, signal)
        for stage in self._stages:
            items = stage(items)
        try:
            return list(items)
        except _Cancelled:
            raise
        except Exception as e:
            signal.fail(e)
            raise

    def _execute(self) -> Iterator[T]:
        buffer = list(self._source)
        options = self._options.resolve(len(buffer))
        partitions = split_every(options.partition_size, buffer)
        if not partitions:
            return

        workers = min(options.degree, len(partitions))
        logger.debug(f"running {len(partitions)} partitions of up to {options.partition_size} elements "
                     f"on {workers} workers (ordered={options.ordered})")

        signal = _FailureSignal()
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='lazinq')
        try:
            futures = [executor.submit(self._run_partition, partition, signal) for partition in partitions]
            completed = futures if options.ordered else as_completed(futures)
            for future in completed:
                if not future.cancelled() and future.exception() is None:
                    yield from future.result()
                    continue

                # stop the siblings, let in-flight ones notice, then surface the first real error
                signal.cancel()
                for pending in futures:
                    pending.cancel()
                wait(futures)
                error = signal.error or future.exception()
                logger.warning(f"parallel query failed with {type(error).__name__}: {error}")
                raise error
        finally:
            signal.cancel()
            executor.shutdown(wait=True, cancel_futures=True)
