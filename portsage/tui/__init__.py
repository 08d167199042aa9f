"""Interactive terminal view of processes and their listening ports."""