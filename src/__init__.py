"""CRM charts service: chart series API over the hosted CRM database."""
