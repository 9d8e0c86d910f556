"""Developer command line for Marathon Trainer."""
