"""
Batch/parallel word counting.

Functions:
- get_worker_count(): Tinh so workers toi uu
- count_documents(): Sequential batch (fallback)
- count_documents_parallel(): ThreadPoolExecutor batch

AN TOAN RACE CONDITION:
- Moi document duoc dem doc lap boi 1 worker vao FrequencyMap RIENG
- Worker KHONG ghi vao aggregate chung (tranh lock contention)
- Merge cac local map MOT LAN tren thread goi, sau khi worker xong
"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Sequence

from core.logging_config import log_debug
from core.tokenization.counter import FrequencyMap, count_words, merge_all

# Worker initialization la expensive, nen dung it threads tru khi co nhieu docs
TASKS_PER_WORKER = 100

# So document toi thieu de trigger parallel processing
MIN_DOCS_FOR_PARALLEL = 2


def get_worker_count(num_tasks: int, max_workers: int = 0) -> int:
    """
    Tinh so luong workers toi uu dua tren so luong tasks va CPU cores.

    - Moi worker xu ly ~TASKS_PER_WORKER tasks.
    - Khong vuot qua so CPU cores (va max_workers neu > 0).
    - Toi thieu 1 worker.

    Args:
        num_tasks: So luong tasks can xu ly.
        max_workers: Gioi han tren do caller dat (0 = khong gioi han).

    Returns:
        So luong workers toi uu.
    """
    cpu_count = os.cpu_count() or 4
    # ceil(num_tasks / TASKS_PER_WORKER)
    calculated = (num_tasks + TASKS_PER_WORKER - 1) // TASKS_PER_WORKER
    # It nhat 2 workers khi co du docs de chia
    if num_tasks >= MIN_DOCS_FOR_PARALLEL:
        calculated = max(calculated, 2)
    workers = min(cpu_count, calculated)
    if max_workers > 0:
        workers = min(workers, max_workers)
    return max(1, workers)


def count_documents(documents: Sequence[str]) -> FrequencyMap:
    """
    Dem tan suat cho nhieu documents - SYNC version.

    Giu lai lam fallback va lam chuan de so sanh voi ban parallel.

    Args:
        documents: Danh sach noi dung documents

    Returns:
        FrequencyMap tong hop (chua freeze)
    """
    return merge_all(count_words(content) for content in documents)


def count_documents_parallel(
    documents: Sequence[str],
    max_workers: int = 4,
) -> FrequencyMap:
    """
    Dem tan suat song song voi ThreadPoolExecutor.

    Futures hoan thanh theo thu tu bat ky; merge() giao hoan + ket hop
    nen ket qua giong het count_documents().

    Args:
        documents: Danh sach noi dung documents
        max_workers: So workers toi da (1 = chay sequential)

    Returns:
        FrequencyMap tong hop (chua freeze)
    """
    if len(documents) == 0:
        return FrequencyMap()

    num_workers = get_worker_count(len(documents), max_workers)
    if num_workers <= 1 or len(documents) < MIN_DOCS_FOR_PARALLEL:
        return count_documents(documents)

    log_debug(
        f"[WordCounter] Counting {len(documents)} documents with {num_workers} workers"
    )

    local_maps: List[FrequencyMap] = []
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        futures = [executor.submit(count_words, content) for content in documents]
        for future in as_completed(futures):
            local_maps.append(future.result())

    # Fold tren thread goi - diem mutate chung duy nhat
    return merge_all(local_maps)
