import os

from tqdm.autonotebook import tqdm as _tqdm

progress = os.getenv('MCLUSTERING_PROGRESSBAR', 'true').lower()
progress = (progress == 'true') or (progress == 'yes') or (progress == 'on')

def tqdm(iterable, verbose = True, **kwargs):
    """`tqdm.tqdm`, disabled unless ``verbose`` and ``MCLUSTERING_PROGRESSBAR`` allow it."""
    return _tqdm(iterable, disable = not (progress and verbose), **kwargs)
