"""
CPU backend for descriptive statistics.

Computes every summary statistic of one sample in a single pass over
the kernels in descriptive._moments.
"""

from __future__ import annotations

import numpy as np

from statlab.core.result import Result
from statlab.core.compute.timing import Timer
from statlab.descriptive.design import SampleDesign
from statlab.descriptive.solution import DescriptiveParams
from statlab.descriptive._moments import (
    sample_mean,
    sample_median,
    sample_mode,
    sample_variance,
    sample_skewness,
    sample_kurtosis,
)


# Minimum sample size per statistic
MIN_N_VARIANCE = 2
MIN_N_SKEWNESS = 3
MIN_N_KURTOSIS = 4


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: SampleDesign) -> Result[DescriptiveParams]:
        """
        Compute all summary statistics.

        Statistics that need more observations than the sample has are
        set to NaN and reported in Result.warnings.
        """
        timer = Timer()
        timer.start()

        x = design.x
        n = design.n
        warnings_list: list[str] = []

        with timer.section('location'):
            mean = sample_mean(x)
            median = sample_median(x)
            mode = sample_mode(x)
            lo = float(np.min(x))
            hi = float(np.max(x))

        with timer.section('dispersion'):
            if n >= MIN_N_VARIANCE:
                variance = sample_variance(x)
                sd = float(np.sqrt(variance))
            else:
                warnings_list.append(
                    f"variance and sd need at least {MIN_N_VARIANCE} observations, got {n}"
                )
                variance = sd = float('nan')

        with timer.section('shape'):
            if n >= MIN_N_SKEWNESS:
                skewness = sample_skewness(x)
            else:
                warnings_list.append(
                    f"skewness needs at least {MIN_N_SKEWNESS} observations, got {n}"
                )
                skewness = float('nan')

            if n >= MIN_N_KURTOSIS:
                kurtosis = sample_kurtosis(x)
            else:
                warnings_list.append(
                    f"kurtosis needs at least {MIN_N_KURTOSIS} observations, got {n}"
                )
                kurtosis = float('nan')

            if n >= MIN_N_SKEWNESS and sd == 0.0:
                warnings_list.append("data are essentially constant")

        timer.stop()

        params = DescriptiveParams(
            count=n,
            mean=mean,
            median=median,
            mode=mode,
            minimum=lo,
            maximum=hi,
            range=hi - lo,
            variance=variance,
            sd=sd,
            skewness=skewness,
            kurtosis=kurtosis,
        )

        return Result(
            params=params,
            info={'n': n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
