import os
import json
import pandas as pd
from datetime import datetime
from typing import Any, Dict, List


class ExperimentLogger:
    def __init__(self, log_dir: str, experiment_name: str):
        """
        Initializes the logger for an exploration run.

        Args:
            log_dir (str): The base directory for logs.
            experiment_name (str): A unique name for the run.
        """
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.experiment_name = f"{experiment_name}_{self.timestamp}"
        self.run_dir = os.path.join(log_dir, self.experiment_name)
        self.logs: List[Dict[str, Any]] = []

        os.makedirs(self.run_dir, exist_ok=True)

    def log_step(self, step: int, data: Dict[str, Any]):
        """
        Records a single placement attempt.

        Args:
            step (int): The attempt number.
            data (Dict[str, Any]): Data for the attempt. ``step_type`` is
                either "placed" or "rejected".
        """
        self.logs.append({"step": step, "timestamp": datetime.now().isoformat(), **data})

    def save_logs(self):
        """Saves all collected logs to a JSON file."""
        log_file = os.path.join(self.run_dir, "experiment_log.json")
        with open(log_file, "w") as f:
            json.dump(self.logs, f, indent=2, default=str)

        summary_file = os.path.join(self.run_dir, "summary.txt")
        self._create_summary_file(summary_file)

        print(f"📁 Logs saved to: {log_file}")
        print(f"📋 Summary saved to: {summary_file}")
        return log_file

    def _create_summary_file(self, summary_file: str):
        """Create a human-readable summary file."""
        placed = [log for log in self.logs if log.get("step_type") == "placed"]
        rejected = [log for log in self.logs if log.get("step_type") == "rejected"]
        out_of_bounds = [log for log in rejected if log.get("error") == "OutOfBounds"]
        overlaps = [log for log in rejected if log.get("error") == "Overlap"]

        with open(summary_file, "w") as f:
            f.write(f"Exploration Summary: {self.experiment_name}\n")
            f.write("=" * 60 + "\n")
            f.write(f"Attempts: {len(self.logs)}\n")
            f.write(f"Patterns Placed: {len(placed)}\n")
            f.write(f"Out Of Bounds: {len(out_of_bounds)}\n")
            f.write(f"Overlaps: {len(overlaps)}\n")
            f.write("\nPlacements:\n")
            f.write("-" * 30 + "\n")

            for log in placed:
                f.write(
                    f"Step {log.get('step', '?')}: tile {log.get('tile')} at {log.get('anchor')} "
                    f"({len(log.get('world_cells', []))} cells)\n"
                )

    def save_results_to_csv(self, results: Dict[str, Any], csv_path: str):
        """
        Saves the run summary to a CSV file.
        If the file exists, it appends the new results.

        Args:
            results (Dict[str, Any]): A dictionary of run results.
            csv_path (str): The path to the output CSV file.
        """
        results_df = pd.DataFrame([results])

        if os.path.exists(csv_path):
            try:
                existing_df = pd.read_csv(csv_path)
                updated_df = pd.concat([existing_df, results_df], ignore_index=True)
            except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
                print(f"Could not read existing csv file: {e}. Creating a new one.")
                updated_df = results_df
        else:
            updated_df = results_df

        parent = os.path.dirname(csv_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        updated_df.to_csv(csv_path, index=False)
        print(f"Results saved to {csv_path}")
