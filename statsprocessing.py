import math
from scipy.special import gamma

def generate_numbers(rng, distribution, size, *args):
    sampler = getattr(rng, distribution)
    return [sampler(*args) for _ in range(size)]

def mean(samples):
    if len(samples) == 0:
        return 0.0
    return sum(samples) / len(samples)

def standard_deviation(samples):
    # выборочное, n - 1
    if len(samples) < 2:
        return 0.0
    m = mean(samples)
    return math.sqrt(sum((s - m) ** 2 for s in samples) / (len(samples) - 1))

def extract_sample_metrics(samples):
    return {
        'size': len(samples),
        'mean': mean(samples),
        'standard_deviation': standard_deviation(samples),
        'min': min(samples) if samples else None,
        'max': max(samples) if samples else None
    }

def gamma_function(x):
    if x > 171.0:
        return 1e308
    return float(gamma(x))
