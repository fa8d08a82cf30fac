import json
import os
from datetime import datetime, timezone


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="busybeaver_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main busybeaver log."""
        self.log_batch([entry])

    def log_batch(self, entries: list):
        """Log a batch of entries to the main busybeaver log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Start a new main log file if the UTC date has changed."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_halting(self, entries: list):
        """Log full tables of machines that reached the halting state."""
        self._log_to_file(f"halting_{self.today}.jsonl", entries)

    def log_unfinished(self, entries: list):
        """Log full tables of machines stopped by a step budget."""
        self._log_to_file(f"unfinished_{self.today}.jsonl", entries)

    def log_run(self, entry: dict):
        """Log a run record to the main log and to the halting/unfinished log."""
        self.log(entry)
        if entry.get("halted"):
            self.log_halting([entry])
        else:
            self.log_unfinished([entry])


def run_entry(table_text, num_states, outcome, max_steps=None):
    """Build the JSON record of one run."""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "table": table_text,
        "states": num_states,
        "steps": outcome.steps,
        "non_blank": outcome.non_blank,
        "halted": outcome.halted,
        "max_steps": max_steps,
    }
