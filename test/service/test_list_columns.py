from tabdiff import data, service


def test_list_columns(write_file_fixture):
    file = write_file_fixture("customers.tsv", "customer_id\tfirst_name\tlast_name\n1\tSteve\tSmith\n")

    assert service.list_columns(file=file) == ("customer_id", "first_name", "last_name")


def test_list_columns_of_an_empty_file(write_file_fixture):
    file = write_file_fixture("empty.csv", "\n\n")

    result = service.list_columns(file=file)

    assert isinstance(result, data.Error)
    assert "header" in result.message


def test_list_columns_reports_malformed_files(write_file_fixture):
    file = write_file_fixture("broken.csv", 'id,name\n1,"Alice\n2,Bob\n')

    result = service.list_columns(file=file)

    assert isinstance(result, data.Error)
    assert "parsing the file" in result.message
