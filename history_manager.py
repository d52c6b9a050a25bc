"""
History Manager for QuadCalc
Keeps the completed calculations of the current session
"""
from datetime import datetime

import config


class HistoryManager:
    def __init__(self, limit=config.MAX_HISTORY_ITEMS):
        self.limit = limit
        self._calculations = []

    def add_calculation(self, expression, result):
        """Add a calculation to history"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._calculations.insert(0, (expression, result, timestamp))
        del self._calculations[self.limit:]

    def get_calculation_history(self, limit=50):
        """Get calculation history, newest first"""
        return list(self._calculations[:limit])

    def clear_calculation_history(self):
        """Clear all calculation history"""
        self._calculations = []

    def format_calculation_history(self, limit=50):
        """Format calculation history for display"""
        formatted = []

        for expr, result, timestamp in self.get_calculation_history(limit):
            formatted.append(f"{timestamp}: {expr} {result}")

        return formatted

    def __len__(self):
        return len(self._calculations)
