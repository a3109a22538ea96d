from typing import List
from greensplit.domain.models import Approach, DemandScores

class DemandScorer:
    def score(self, approaches: List[Approach]) -> DemandScores:
        # Score = density * waitFactor * max(1, queue length)
        scores = [
            a.profile.density * a.profile.waitFactor * max(1, a.queue_length())
            for a in approaches
        ]
        sum_scores = sum(scores)
        if sum_scores == 0:
            sum_scores = 1
        return DemandScores(scores=scores, sumScores=sum_scores)
