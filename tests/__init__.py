"""MANGOS test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module. Hypothesis property tests
          live next to the unit tests of the module they exercise and carry
          @pytest.mark.property.
- e2e/  : The `mangos` command driven through Click's CliRunner.

Markers `unit` and `e2e` are applied automatically from the folder.
"""
