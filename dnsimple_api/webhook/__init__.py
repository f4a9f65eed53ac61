"""Parsing of the events DNSimple sends to webhooks, with typed event data."""