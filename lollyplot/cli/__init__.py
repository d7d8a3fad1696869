"""Command-line subcommands for LollyPlot"""
