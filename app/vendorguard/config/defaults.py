"""Built-in cleanup table.

Maps commonly-depended-on packages to directories that are not needed at
runtime (tests, documentation, examples, build scripts). Package keys are
lower case; paths are case-sensitive directory names inside the package.
"""

DEFAULT_CLEANUP_PATHS: dict[str, tuple[str, ...]] = {
    "behat/mink": ("tests", "driver-testsuite"),
    "behat/mink-browserkit-driver": ("tests",),
    "behat/mink-selenium2-driver": ("tests",),
    "brumann/polyfill-unserialize": ("tests",),
    "composer/composer": ("bin",),
    "doctrine/instantiator": ("tests",),
    "drupal/coder": ("coder_sniffer/Drupal/Test", "coder_sniffer/DrupalPractice/Test"),
    "egulias/email-validator": ("documentation", "tests"),
    "friends-of-behat/mink-browserkit-driver": ("tests",),
    "guzzlehttp/promises": ("tests",),
    "guzzlehttp/psr7": ("tests",),
    "instaclick/php-webdriver": ("doc", "test"),
    "jcalderonzumba/gastonjs": ("docs", "examples", "tests"),
    "jcalderonzumba/mink-phantomjs-driver": ("tests",),
    "justinrainbow/json-schema": ("demo",),
    "laminas/laminas-escaper": ("doc",),
    "laminas/laminas-feed": ("doc",),
    "laminas/laminas-stdlib": ("doc",),
    "masterminds/html5": ("bin", "test"),
    "mikey179/vfsstream": ("src/test",),
    "myclabs/deep-copy": ("doc",),
    "pear/archive_tar": ("docs", "tests"),
    "pear/console_getopt": ("tests",),
    "pear/pear-core-minimal": ("tests",),
    "pear/pear_exception": ("tests",),
    "phar-io/manifest": ("examples", "tests"),
    "phar-io/version": ("tests",),
    "phpdocumentor/reflection-docblock": ("tests",),
    "phpspec/prophecy": ("fixtures", "spec", "tests"),
    "phpunit/php-code-coverage": ("tests",),
    "phpunit/php-timer": ("tests",),
    "phpunit/php-token-stream": ("tests",),
    "phpunit/phpunit": ("tests",),
    "sebastian/code-unit-reverse-lookup": ("tests",),
    "sebastian/comparator": ("tests",),
    "sebastian/diff": ("tests",),
    "sebastian/environment": ("tests",),
    "sebastian/exporter": ("tests",),
    "sebastian/global-state": ("tests",),
    "sebastian/object-enumerator": ("tests",),
    "sebastian/object-reflector": ("tests",),
    "sebastian/recursion-context": ("tests",),
    "seld/jsonlint": ("tests",),
    "squizlabs/php_codesniffer": ("tests",),
    "stack/builder": ("tests",),
    "symfony-cmf/routing": ("Test", "Tests"),
    "symfony/browser-kit": ("Tests",),
    "symfony/class-loader": ("Tests",),
    "symfony/console": ("Tests",),
    "symfony/css-selector": ("Tests",),
    "symfony/debug": ("Tests",),
    "symfony/dependency-injection": ("Tests",),
    "symfony/dom-crawler": ("Tests",),
    "symfony/error-handler": ("Tests",),
    "symfony/event-dispatcher": ("Tests",),
    "symfony/filesystem": ("Tests",),
    "symfony/finder": ("Tests",),
    "symfony/http-foundation": ("Tests",),
    "symfony/http-kernel": ("Tests",),
    "symfony/phpunit-bridge": ("Tests",),
    "symfony/process": ("Tests",),
    "symfony/psr-http-message-bridge": ("Tests",),
    "symfony/routing": ("Tests",),
    "symfony/serializer": ("Tests",),
    "symfony/translation": ("Tests",),
    "symfony/validator": ("Tests",),
    "symfony/yaml": ("Tests",),
    "theseer/tokenizer": ("tests",),
    "twig/twig": ("doc", "ext", "test", "tests"),
}
