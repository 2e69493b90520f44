"""Observations, report fields and market-status consensus for reports with a market status."""