"""
Utilities package for propgen.

Constants, validators and formatters used by the engine, plus developer
tooling for sampling generators and displaying value distributions. Import
the submodules directly; nothing is re-exported here to keep the engine's
import graph acyclic.
"""
