"""Zone file preprocessing, parsing and resolution into records."""