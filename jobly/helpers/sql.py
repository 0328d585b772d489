"""
SQL Helpers - Build parameterized SQL fragments.

Provides:
- Partial update SET lists ("first_name"=$1, "age"=$2)
- WHERE predicates for company and job filtering

Placeholders are positional ($1, $2, ...) and always line up, in order,
with the returned parameter list. Column names only ever come from code
(the field maps below or the caller's keys), never from request data.
"""

from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from jobly.core.errors import ValidationError


class UpdateFragment(NamedTuple):
    set_cols: str
    values: List[Any]


class FilterFragment(NamedTuple):
    filter_string: str
    value_list: List[Any]


# Recognized filter fields, in the order their clauses are emitted
COMPANY_FILTER_FIELDS = ("nameLike", "minEmployees", "maxEmployees")
JOB_FILTER_FIELDS = ("titleLike", "minSalary", "hasEquity")


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Optional[Mapping[str, str]] = None) -> UpdateFragment:
    """
    Build the SET list for a partial UPDATE.

    Args:
        data_to_update: {logicalName: newValue}, e.g. {"firstName": "Aliya", "age": 32}
        js_to_sql: {logicalName: column} for names that differ, e.g. {"firstName": "first_name"}

    Returns:
        UpdateFragment('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        ValidationError if there is nothing to update
    """
    keys = list(data_to_update)
    if not keys:
        raise ValidationError("No data")

    js_to_sql = js_to_sql or {}
    cols = [f'"{js_to_sql.get(key) or key}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return UpdateFragment(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )


def _criteria_values(criteria: Any, fields) -> Dict[str, Any]:
    """Pull the recognized fields out of a dict or an object with attributes."""
    if criteria is None:
        return {field: None for field in fields}
    if isinstance(criteria, Mapping):
        return {field: criteria.get(field) for field in fields}
    return {field: getattr(criteria, field, None) for field in fields}


def sql_company_filter(data_to_filter: Any) -> FilterFragment:
    """
    Build the WHERE predicate for searching companies.

    Recognized criteria: nameLike, minEmployees, maxEmployees.
    A criterion counts only when truthy, so minEmployees=0 is ignored.

    Raises:
        ValidationError if no criterion is given, or minEmployees > maxEmployees
    """
    criteria = _criteria_values(data_to_filter, COMPANY_FILTER_FIELDS)
    if not any(criteria.values()):
        raise ValidationError("No data")

    name_like = criteria["nameLike"]
    min_employees = criteria["minEmployees"]
    max_employees = criteria["maxEmployees"]

    if min_employees and max_employees and min_employees > max_employees:
        raise ValidationError(
            f"min greater than max: minEmployees {min_employees} > maxEmployees {max_employees}"
        )

    filter_list = []
    value_list = []

    if name_like:
        value_list.append(f"%{name_like}%")
        filter_list.append(f"name ILIKE ${len(value_list)}")
    if min_employees:
        value_list.append(min_employees)
        filter_list.append(f"num_employees >= ${len(value_list)}")
    if max_employees:
        value_list.append(max_employees)
        filter_list.append(f"num_employees <= ${len(value_list)}")

    return FilterFragment(" AND ".join(filter_list), value_list)


def sql_job_filter(data_to_filter: Any) -> FilterFragment:
    """
    Build the WHERE predicate for searching jobs.

    Recognized criteria: titleLike, minSalary, hasEquity.
    hasEquity adds a constant "equity > 0" clause and no parameter.

    Never raises; may return an empty filter_string, which the caller
    must not turn into a bare WHERE.
    """
    criteria = _criteria_values(data_to_filter, JOB_FILTER_FIELDS)

    filter_list = []
    value_list = []

    if criteria["titleLike"]:
        value_list.append(f"%{criteria['titleLike']}%")
        filter_list.append(f"title ILIKE ${len(value_list)}")
    if criteria["minSalary"]:
        value_list.append(criteria["minSalary"])
        filter_list.append(f"salary >= ${len(value_list)}")
    if criteria["hasEquity"]:
        filter_list.append("equity > 0")

    return FilterFragment(" AND ".join(filter_list), value_list)
