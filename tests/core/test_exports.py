import unittest
import scriptkit
import scriptkit.core
import scriptkit.pattern
import scriptkit.utils


class TestExports(unittest.TestCase):
    def test_all_names_resolve(self):
        """Every package lists its public names in `__all__`, and each of them is importable."""
        for module in (scriptkit, scriptkit.core, scriptkit.pattern, scriptkit.utils):
            self.assertTrue(module.__all__, module.__name__)
            for name in module.__all__:
                self.assertTrue(hasattr(module, name), f'{module.__name__}.{name}')

    def test_star_import(self):
        namespace: dict = {}
        exec('from scriptkit import *', namespace)
        self.assertIn('Seq', namespace)
        self.assertIn('Regex', namespace)
        self.assertNotIn('annotations', namespace)


if __name__ == '__main__':
    unittest.main()
