from bas_atlas.models import Dataset
from bas_atlas.services.categories import build_categories


def _catalog(make_dataset) -> Dataset:
    return make_dataset(
        brands=[
            {"id": "acme", "name": "Acme"},
            {"id": "globex", "name": "Globex", "slug": "globex-corp"},
            {"id": "initech", "name": "Initech"},
        ],
        types=[
            {"id": "thermostat", "name": "Thermostat"},
            {"id": "controller", "name": "Controller", "slug": "controllers"},
            {"id": "sensor", "name": "sensor"},
        ],
        models=[
            {"id": "acme-t1", "name": "Acme T1", "brand": "acme", "type": "thermostat"},
            {"id": "acme-t2", "name": "Acme T2", "brand": "acme", "type": "thermostat"},
            {"id": "acme-c1", "name": "Acme C1", "brand": "acme", "type": "controller"},
            {"id": "globex-s1", "name": "Globex S1", "brand": "globex", "type": "sensor"},
        ],
    )


def test_single_model_scenario(make_dataset):
    dataset = make_dataset(
        brands=[{"id": "acme", "name": "Acme"}],
        types=[{"id": "thermostat", "name": "Thermostat"}],
        models=[{"id": "acme-t1", "name": "Acme T1", "brand": "acme", "type": "thermostat"}],
    )

    categories = build_categories(dataset).to_dict(dataset.version)

    assert categories["brands"] == [
        {
            "id": "acme",
            "name": "Acme",
            "slug": "acme",
            "count": 1,
            "types": [{"id": "thermostat", "name": "Thermostat", "slug": "thermostat", "count": 1}],
        }
    ]
    assert categories["types"] == [{"id": "thermostat", "name": "Thermostat", "slug": "thermostat", "count": 1}]


def test_brand_types_are_counted_and_sorted_by_name(make_dataset):
    categories = build_categories(_catalog(make_dataset))

    acme = next(b for b in categories.brands if b.id == "acme")
    assert acme.count == 3
    assert [(t.id, t.count) for t in acme.types] == [("controller", 1), ("thermostat", 2)]
    assert acme.types[0].slug == "controllers"


def test_brand_without_models_has_zero_count_and_no_types(make_dataset):
    categories = build_categories(_catalog(make_dataset))

    initech = next(b for b in categories.brands if b.id == "initech")
    assert initech.count == 0
    assert initech.types == ()


def test_lists_are_sorted_by_name_case_insensitively(make_dataset):
    categories = build_categories(_catalog(make_dataset))

    assert [b.name for b in categories.brands] == ["Acme", "Globex", "Initech"]
    assert [t.name for t in categories.types] == ["Controller", "sensor", "Thermostat"]


def test_type_counts_sum_to_total_models(make_dataset):
    dataset = _catalog(make_dataset)
    categories = build_categories(dataset)

    assert sum(t.count for t in categories.types) == dataset.total_models
    assert sum(b.count for b in categories.brands) == dataset.total_models


def test_slug_defaults_to_id(make_dataset):
    categories = build_categories(_catalog(make_dataset))

    slugs = {b.id: b.slug for b in categories.brands}
    assert slugs == {"acme": "acme", "globex": "globex-corp", "initech": "initech"}


def test_unknown_type_falls_back_to_raw_id_for_display(make_dataset):
    dataset = make_dataset(
        brands=[{"id": "acme", "name": "Acme"}],
        models=[{"id": "acme-x", "name": "Acme X", "brand": "acme", "type": "mystery"}],
    )

    acme = build_categories(dataset).brands[0]

    assert acme.types[0].to_dict() == {"id": "mystery", "name": "mystery", "slug": "mystery", "count": 1}
