"""Observations and report fields carrying a benchmark price together with bid and ask."""