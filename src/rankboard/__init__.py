"""Top players by mean score from CSV play logs.

Pipeline: csv_log reader -> aggregation -> ranking -> csv_log writer.
"""
