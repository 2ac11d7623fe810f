import os


def build_pool_kwargs(kwargs_dict=None):
    if not kwargs_dict:
        kwargs_dict = {}
    num_workers = kwargs_dict.get("num_workers") or os.cpu_count()
    multiprocessing_context = kwargs_dict.get("multiprocessing_context") or "fork"
    chunksize = kwargs_dict.get("chunksize") or 64
    return {
        "num_workers": num_workers,
        "multiprocessing_context": multiprocessing_context,
        "chunksize": chunksize,
    }
