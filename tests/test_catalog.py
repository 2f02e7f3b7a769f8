import unittest
from unittest import mock

from movieRating.catalog import (
    CatalogAllocationError,
    EmptySlotError,
    Movie,
    MovieCatalog,
    MovieInputError,
    MovieNotFoundError,
    OutOfRangeError,
)


def _movie(title, director='Someone', year=2000):
    return Movie(title, director, year)


class MovieCatalogTests(unittest.TestCase):
    def test_capacity_must_be_positive(self):
        for capacity in (0, -3, 1.5, True):
            with self.assertRaises(MovieInputError):
                MovieCatalog(capacity)

    def test_growth_doubles_and_keeps_movies(self):
        catalog = MovieCatalog(1)
        movies = [_movie(f'M{i}') for i in range(5)]
        capacities = []
        for movie in movies:
            catalog.add(movie)
            capacities.append(catalog.capacity)
            self.assertLessEqual(catalog.count, catalog.capacity)

        self.assertEqual(capacities, [1, 2, 4, 4, 8])
        for i, movie in enumerate(movies):
            self.assertIs(catalog[i], movie)
            self.assertEqual(movie.title, f'M{i}')

    def test_add_remove_scenario(self):
        catalog = MovieCatalog(1)
        a, b = _movie('A'), _movie('B')
        catalog.add(a)
        catalog.add(b)
        self.assertEqual(catalog.capacity, 2)
        self.assertEqual(catalog.count, 2)

        catalog.remove(0)
        self.assertEqual(len(catalog), 1)
        self.assertIs(catalog[0], b)

    def test_add_then_remove_restores_count(self):
        catalog = MovieCatalog(10)
        catalog.add(_movie('Heat'))
        before = catalog.count
        index = catalog.add(_movie('Inception'))
        catalog.remove(index)
        self.assertEqual(catalog.count, before)
        self.assertIsNone(catalog.search('Inception'))

    def test_remove_shifts_tail_left(self):
        catalog = MovieCatalog(4)
        movies = [_movie(t) for t in 'ABCD']
        for movie in movies:
            catalog.add(movie)

        catalog.remove(1)
        self.assertEqual(catalog.count, 3)
        self.assertEqual(catalog.slots(), [movies[0], movies[2], movies[3], None])

    def test_remove_rejects_bad_index(self):
        catalog = MovieCatalog(4)
        catalog.add(_movie('A'))
        for index in (-1, 1, 4):
            with self.assertRaises(OutOfRangeError):
                catalog.remove(index)
        self.assertEqual(catalog.count, 1)

    def test_remove_rejects_empty_slot(self):
        catalog = MovieCatalog(4)
        catalog.add(_movie('A'))
        catalog.add(_movie('B'))
        catalog.vacate(0)
        with self.assertRaises(EmptySlotError):
            catalog.remove(0)
        self.assertEqual(catalog.count, 2)

    def test_add_reuses_lowest_gap(self):
        catalog = MovieCatalog(4)
        for title in 'ABC':
            catalog.add(_movie(title))
        catalog.vacate(2)
        catalog.vacate(0)

        index = catalog.add(_movie('D'))
        self.assertEqual(index, 0)
        self.assertEqual(catalog.count, 3)
        self.assertEqual(catalog.add(_movie('E')), 2)
        self.assertEqual(catalog.add(_movie('F')), 3)
        self.assertEqual([m.title for m in catalog], ['D', 'B', 'E', 'F'])

    def test_compact_closes_gaps(self):
        catalog = MovieCatalog(4)
        for title in 'ABC':
            catalog.add(_movie(title))
        catalog.vacate(0)
        catalog.compact()
        self.assertEqual(catalog.count, 2)
        self.assertEqual([m.title for m in catalog.slots() if m], ['B', 'C'])
        self.assertIsNone(catalog.slots()[2])

    def test_failed_growth_leaves_catalog_unchanged(self):
        catalog = MovieCatalog(2)
        catalog.add(_movie('A'))
        catalog.add(_movie('B'))
        with mock.patch.object(catalog, '_new_storage', side_effect=MemoryError):
            with self.assertRaises(CatalogAllocationError):
                catalog.add(_movie('C'))
        self.assertEqual((catalog.count, catalog.capacity), (2, 2))
        self.assertIsNone(catalog.search('C'))

    def test_add_rejects_non_movie(self):
        with self.assertRaises(TypeError):
            MovieCatalog(2).add('Inception')

    def test_search_returns_first_match(self):
        catalog = MovieCatalog(4)
        self.assertIsNone(catalog.search('Inception'))
        catalog.add(_movie('Heat'))
        catalog.add(_movie('Inception', 'Nolan'))
        catalog.add(_movie('Inception', 'Other'))
        self.assertEqual(catalog.search('Inception'), 1)
        self.assertIsNone(catalog.search('inception'))
        self.assertEqual(catalog.find('Inception').director, 'Nolan')
        with self.assertRaises(MovieNotFoundError):
            catalog.find('Alien')

    def test_sort_by_title(self):
        catalog = MovieCatalog(2)
        for title in ('Zoo', 'Apple', 'Mango'):
            catalog.add(_movie(title))
        catalog.sort()
        self.assertEqual([m.title for m in catalog], ['Apple', 'Mango', 'Zoo'])

    def test_sort_by_year_descending(self):
        catalog = MovieCatalog(4)
        catalog.add(_movie('A', year=1990))
        catalog.add(_movie('B', year=2010))
        catalog.add(_movie('C', year=2000))
        catalog.sort('year', reverse=True)
        self.assertEqual([m.title for m in catalog], ['B', 'C', 'A'])

    def test_sort_skips_gaps(self):
        catalog = MovieCatalog(4)
        for title in ('Zoo', 'Apple', 'Mango'):
            catalog.add(_movie(title))
        catalog.vacate(1)
        catalog.sort()
        slots = catalog.slots()
        self.assertIsNone(slots[1])
        self.assertEqual([slots[0].title, slots[2].title], ['Mango', 'Zoo'])

    def test_sort_rejects_unknown_field(self):
        with self.assertRaises(MovieInputError):
            MovieCatalog(2).sort('budget')

    def test_clear_releases_everything(self):
        catalog = MovieCatalog(2)
        catalog.add(_movie('A'))
        catalog.clear()
        self.assertEqual(catalog.count, 0)
        self.assertEqual(catalog.slots(), [None, None])


if __name__ == '__main__':
    unittest.main()
