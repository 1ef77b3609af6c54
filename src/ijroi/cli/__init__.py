"""ijroi CLI — Click commands for inspecting ROI files."""
