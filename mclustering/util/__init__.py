from .progress import tqdm
