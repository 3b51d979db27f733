"""brewcomp - shell completion generator for brew.

Builds bash and zsh completion scripts from a command manifest describing
each command's options, named argument types, aliases and descriptions.
Generation is synchronous and deterministic: the same manifest always
renders byte-identical scripts.
"""
