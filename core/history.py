from collections import deque

class HistoryTracker:
    """
    Recent scores for the sparkline (bounded FIFO, oldest first) plus the
    whole-session score list used for stats. Only reset() clears the session list.
    """
    def __init__(self, capacity=120):
        self.capacity = int(capacity)
        self.recent = deque(maxlen=self.capacity)
        self.session = []

    def push(self, score):
        self.recent.append(score)   # deque evicts the oldest past capacity
        self.session.append(score)

    def recent_scores(self):
        return list(self.recent)

    def reset(self):
        self.recent.clear()
        self.session = []

    def __len__(self):
        return len(self.session)
