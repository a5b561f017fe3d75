from pet_dashboard.stats import compute_stats, most_common_type, oldest_pet, summary_lines, youngest_pet

def pet(name=None, type="Dog", age="Adult", **extra):
    rec = {"id": extra.pop("id", 1), "name": name, "type": type, "age": age}
    rec.update(extra)
    return rec

def test_empty_input():
    stats = compute_stats([])
    assert stats["total"] == 0
    assert stats["avg_age"] == 0
    assert stats["type_counts"] == {}
    assert stats["most_common_type"] == {"type": None, "count": 0}
    assert stats["oldest_pet"] == {"name": None, "age": 0}
    assert stats["youngest_pet"] is None

def test_total_matches_length():
    records = [pet(name=f"p{i}", id=i) for i in range(7)]
    assert compute_stats(records)["total"] == 7

def test_average_age_from_labels():
    records = [pet(age="Baby"), pet(age="Adult"), pet(age="Senior")]
    assert compute_stats(records)["avg_age"] == 5.17

def test_average_age_unknown_labels_count_as_zero():
    records = [pet(age="Baby"), pet(age="Puppy"), pet(age=None), pet(age="")]
    assert compute_stats(records)["avg_age"] == 0.13

def test_type_counts_and_most_common():
    stats = compute_stats([pet(type="Dog"), pet(type="Dog"), pet(type="Cat")])
    assert stats["type_counts"] == {"Dog": 2, "Cat": 1}
    assert list(stats["type_counts"]) == ["Dog", "Cat"]
    assert stats["most_common_type"] == {"type": "Dog", "count": 2}

def test_most_common_type_tie_keeps_first_seen():
    assert most_common_type({"Cat": 2, "Dog": 2, "Bird": 1}) == {"type": "Cat", "count": 2}

def test_missing_type_counted_under_none():
    stats = compute_stats([{"id": 1, "name": "x"}])
    assert stats["type_counts"] == {None: 1}

def test_oldest_and_youngest_from_numeric_ages():
    records = [pet("A", age="3"), pet("B", age="7"), pet("C", age="2")]
    stats = compute_stats(records)
    assert stats["oldest_pet"] == {"name": "B", "age": 7}
    assert stats["youngest_pet"] == {"name": "C", "age": 2}

def test_oldest_keeps_zero_baseline_for_labels():
    records = [pet("A", age="Adult"), pet("B", age="Senior")]
    assert oldest_pet(records) == {"name": None, "age": 0}

def test_oldest_ignores_non_positive_ages():
    assert oldest_pet([pet("A", age="0"), pet("B", age="-2")]) == {"name": None, "age": 0}

def test_youngest_single_zero_age_record():
    assert youngest_pet([pet("Pip", age="0")]) == {"name": "Pip", "age": 0}

def test_youngest_zero_age_is_not_overwritten():
    assert youngest_pet([pet("Pip", age="0"), pet("Rex", age="5")]) == {"name": "Pip", "age": 0}

def test_youngest_skips_unparseable_ages():
    records = [pet("A", age="Baby"), pet("B", age="4"), pet("C", age="Senior")]
    assert youngest_pet(records) == {"name": "B", "age": 4}
    assert youngest_pet([pet("A", age="Baby")]) is None

def test_malformed_fields_do_not_raise():
    records = [{"id": 1}, {"id": 2, "age": ["Adult"], "type": "Cat"}, {}, {"id": 3, "name": "Rex", "type": ["Dog"], "age": "Adult"}]
    stats = compute_stats(records)
    assert stats["total"] == 4
    assert stats["avg_age"] == 2.5
    assert stats["type_counts"] == {None: 2, "Cat": 1, "['Dog']": 1}

def test_summary_lines():
    lines = summary_lines(compute_stats([pet("A", type="Dog", age="3"), pet("B", type="Cat", age="1")]))
    assert lines[0] == "Total Pets: 2"
    assert "Type Distribution: Dog: 1, Cat: 1" in lines
    assert "Oldest Pet: A (3 years old)" in lines
    assert "Youngest Pet: B (1 years old)" in lines
