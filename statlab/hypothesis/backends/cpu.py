"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from statlab.core.result import Result
from statlab.core.compute.timing import Timer
from statlab.hypothesis._common import TestParams
from statlab.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[TestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "t_one_sample":
                from statlab.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "t_two_sample":
                from statlab.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "t_paired":
                from statlab.hypothesis.backends._t_test import t_paired
                params, warnings_list = t_paired(design)
            elif test_type == "z_test":
                from statlab.hypothesis.backends._z_test import z_test
                params, warnings_list = z_test(design)
            elif test_type == "chisq_gof":
                from statlab.hypothesis.backends._chisq_test import chisq_gof
                params, warnings_list = chisq_gof(design)
            elif test_type == "chisq_independence":
                from statlab.hypothesis.backends._chisq_test import chisq_independence
                params, warnings_list = chisq_independence(design)
            elif test_type == "anova_oneway":
                from statlab.hypothesis.backends._anova import anova_oneway
                params, warnings_list = anova_oneway(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'method': design.method},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
